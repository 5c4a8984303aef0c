"""Shared pytest fixtures for the LLD converter test suite."""

import pytest

from lld_converter.models.lld import LegalLandDescription

# ---------------------------------------------------------------------------
# Reference descriptions
# ---------------------------------------------------------------------------


@pytest.fixture()
def fort_mcmurray_lld() -> LegalLandDescription:
    """NE-36-87-18-W4, north-east corner section of a northern township."""
    return LegalLandDescription(
        quarter_section="NE", section=36, township=87, range=18, meridian=4
    )


@pytest.fixture()
def origin_lld() -> LegalLandDescription:
    """SW-1-1-1-W4, the first quarter section west of the 4th Meridian."""
    return LegalLandDescription(
        quarter_section="SW", section=1, township=1, range=1, meridian=4
    )


@pytest.fixture()
def incomplete_lld() -> LegalLandDescription:
    """Description with the section left blank."""
    return LegalLandDescription(
        quarter_section="NE", section=None, township=87, range=18, meridian=4
    )
