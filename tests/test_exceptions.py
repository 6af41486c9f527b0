"""Tests for custom exceptions."""

from addtree.exceptions import EntriesFormatError, TreeAssemblyError


class TestTreeAssemblyError:
    def test_message_and_attributes(self):
        error = TreeAssemblyError(["/proj/a", "/proj/a/b"])
        assert error.candidate_paths == ["/proj/a", "/proj/a/b"]
        assert str(error) == "No roots assembled from 2 candidates"
        assert isinstance(error, RuntimeError)


class TestEntriesFormatError:
    def test_without_source(self):
        error = EntriesFormatError("garbage")
        assert error.line == "garbage"
        assert error.source is None
        assert str(error) == "Malformed Entries line: 'garbage'"
        assert isinstance(error, ValueError)

    def test_with_source(self):
        error = EntriesFormatError("garbage", "/proj/CVS/Entries")
        assert str(error) == "Malformed Entries line: 'garbage' in /proj/CVS/Entries"
