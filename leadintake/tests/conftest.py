import pytest
from leadintake.tests.fixtures.form import *
from leadintake.tests.fixtures.backend import *
