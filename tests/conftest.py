"""Shared transcript samples for the test suite."""

import pytest

TWO_SPEAKERS = "[00:00:01:00 - 00:00:05:00]\nALICE\nHello there.\n[00:00:06:00 - 00:00:09:00]\nBOB\nHi Alice."

INTERVIEW = """Interview - Take 3

[00:00:01:00 - 00:00:04:12]
ALICE
Thanks for coming in today.

[00:00:04:13 - 00:00:09:00]
BOB
Happy to be here.
It has been a while.

[00:00:09:01 - 00:00:12:00]
CAROL
Shall we start?

[00:00:12:01 - 00:00:15:20]
ALICE
Yes, first question.
"""


@pytest.fixture
def two_speakers():
    return TWO_SPEAKERS


@pytest.fixture
def interview():
    return INTERVIEW
