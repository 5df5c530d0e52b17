#
# Mixcol - Exceptions Tests
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from mixcol.exceptions import CollectionError, DuplicateKeyError, KeyNotFoundError, ReadOnlyError


# Tests ----------------------------------------------------------------------------------------------------------------

class TestExceptions:

    @pytest.mark.parametrize(
        "exc_type, builtin_base",
        [
            pytest.param(DuplicateKeyError, ValueError, id="duplicate-key"),
            pytest.param(KeyNotFoundError, KeyError, id="key-not-found"),
            pytest.param(ReadOnlyError, TypeError, id="read-only"),
        ],
    )
    def test_hierarchy(self, exc_type, builtin_base):
        exc = exc_type("name")
        assert isinstance(exc, CollectionError)
        assert isinstance(exc, builtin_base)
        assert exc.key == "name"

    @pytest.mark.parametrize(
        "exc, message",
        [
            pytest.param(DuplicateKeyError("name"), "key <str: 'name'> was added previously", id="duplicate-key"),
            pytest.param(KeyNotFoundError(3), "key <int: 3> does not exist in the collection", id="key-not-found"),
            pytest.param(ReadOnlyError("port"), "attempt to modify a read-only collection with key <str: 'port'>",
                         id="read-only"),
        ],
    )
    def test_messages(self, exc, message):
        assert str(exc) == message

    def test_key_not_found_message_unquoted(self):
        """KeyError normally wraps its message in quotes."""
        assert not str(KeyNotFoundError("name")).startswith("'")
