#
# Pytest Fixtures
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from mixcol.collections import MixedCollection


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture
def actor() -> MixedCollection:
    """Flat collection with string keys."""
    return MixedCollection({
        "name": "Clinton Eastwood, Jr",
        "alias": "Clint Eastwood",
        "occupation": "actor, director, producer",
    })


@pytest.fixture
def users() -> MixedCollection:
    """Tree mixing plain dicts, lists and nested collections."""
    return MixedCollection({
        "users": {
            "victor": MixedCollection({
                "name": "Víctor",
                "country": "Spain",
            }),
        },
        "admins": [
            {"name": "root"},
        ],
        "port": 443,
    })


@pytest.fixture
def config() -> MixedCollection:
    """Collection holding a nested collection value."""
    return MixedCollection({
        "section": "config",
        "values": MixedCollection({"port": 443}),
    })
