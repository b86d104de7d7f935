"""Client for the contact endpoint that stores booking requests.

The endpoint takes a form-encoded POST and answers with a JSON body of the
form {"status": "success" | "error", "message": "..."}.
"""

import json
import logging
from typing import Dict, Optional

import httpx
from pydantic import ValidationError

from leadintake.core.config import settings
from leadintake.models.contact import (
    ContactResponse,
    ContactResponseStatus,
    SubmissionOutcome,
)

logger = logging.getLogger(__name__)


class ContactClient:
    """Posts booking requests to the contact endpoint.

    Args:
        endpoint_url: Endpoint to post to, defaults to CONTACT_ENDPOINT_URL
        timeout: Request timeout in seconds, None waits indefinitely
        transport: Optional httpx transport, used to route requests in tests
    """

    def __init__(
        self,
        endpoint_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.endpoint_url = endpoint_url or settings.CONTACT_ENDPOINT_URL
        self.timeout = timeout if timeout is not None else settings.REQUEST_TIMEOUT
        self.transport = transport

    async def submit(self, form_data: Dict[str, str]) -> SubmissionOutcome:
        """Send a booking request and classify the backend's answer.

        Args:
            form_data: Field values keyed by field name

        Returns:
            success when the backend reports "success", soft_failure for any
            other well-formed answer, hard_failure for transport errors,
            non-2xx responses and bodies that are not a valid response
        """
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(
                    self.endpoint_url,
                    data=form_data,
                    headers={"Accept": "application/json"},
                )

            if not response.is_success:
                logger.error(
                    f"Contact endpoint returned {response.status_code}: {response.text}"
                )
                return SubmissionOutcome.hard_failure(f"HTTP {response.status_code}")

            body = ContactResponse.model_validate(json.loads(response.text))

        except httpx.HTTPError as e:
            logger.error(f"Error sending booking request to {self.endpoint_url}: {str(e)}")
            return SubmissionOutcome.hard_failure(str(e))
        except ValidationError as e:
            logger.error(f"Unexpected response shape from contact endpoint: {str(e)}")
            return SubmissionOutcome.hard_failure("Invalid response")
        except ValueError as e:
            logger.error(f"Contact endpoint returned invalid JSON: {str(e)}")
            return SubmissionOutcome.hard_failure("Invalid JSON")

        if body.status == ContactResponseStatus.SUCCESS.value:
            logger.info("Booking request accepted by contact endpoint")
            return SubmissionOutcome.success(body.message)

        logger.warning(f"Booking request rejected by contact endpoint: {body.message}")
        return SubmissionOutcome.soft_failure(body.message)


contact_client = ContactClient()
