"""
Unit tests for the tag mutation operations.

Each operation is checked for argument validation, preconditions, the exiftool
directive it issues, and the cache state after success and after a failed call.
"""

import pytest

from exifcache.core.tag_mutations import (
    add_tag,
    add_tag_value,
    append_directive,
    clear_directive,
    remove_tag,
    remove_tag_value,
    remove_value_directive,
    set_directive,
)
from exifcache.domain.tags import (
    AlreadyExistsError,
    InvalidArgumentError,
    NotFoundError,
    Scalar,
    TagList,
    ToolInvocationError,
    TypeMismatchError,
)


class TestDirectives:
    """Test exiftool directive strings."""

    def test_set(self):
        assert set_directive("Title", "Beach") == "-Title=Beach"

    def test_clear(self):
        assert clear_directive("Title") == "-Title="

    def test_append(self):
        assert append_directive("Keywords", "sea") == "-Keywords+=sea"

    def test_remove_value_uses_removal_operator(self):
        assert remove_value_directive("Keywords", "sea") == "-Keywords-=sea"

    def test_group_prefixed_names_pass_through(self):
        assert set_directive("XMP-dc:Title", "x") == "-XMP-dc:Title=x"


class TestArgumentValidation:
    """Empty arguments are rejected before exiftool runs."""

    @pytest.mark.parametrize(
        ("operation", "args", "parameter"),
        [
            (add_tag, ("", "x"), "name"),
            (add_tag, ("Title", ""), "value"),
            (remove_tag, ("",), "name"),
            (add_tag_value, ("", "x"), "name"),
            (add_tag_value, ("Keywords", ""), "value"),
            (remove_tag_value, ("", "x"), "name"),
            (remove_tag_value, ("Keywords", ""), "value"),
        ],
    )
    def test_empty_argument(self, make_cache, operation, args, parameter):
        cache, runner = make_cache({"Title": "x", "Keywords": ["x"]})
        before = dict(cache.tags())

        with pytest.raises(InvalidArgumentError) as exc_info:
            operation(cache, *args)

        assert exc_info.value.parameter == parameter
        assert runner.apply_calls == []
        assert cache.tags() == before

    def test_name_checked_before_value(self, make_cache):
        cache, _ = make_cache({})

        with pytest.raises(InvalidArgumentError) as exc_info:
            add_tag(cache, "", "")

        assert exc_info.value.parameter == "name"


class TestAddTag:
    """Test creating a scalar tag."""

    def test_add_then_read(self, make_cache):
        cache, runner = make_cache({})

        add_tag(cache, "Title", "Beach")

        assert cache.string("Title") == "Beach"
        assert cache.tags()["Title"] == Scalar("Beach")
        assert runner.apply_calls == [("-Title=Beach", "/photos/beach.jpg")]

    def test_second_add_raises_without_invoking_tool(self, make_cache):
        cache, runner = make_cache({})
        add_tag(cache, "Title", "Beach")

        with pytest.raises(AlreadyExistsError) as exc_info:
            add_tag(cache, "Title", "Sea")

        assert exc_info.value.name == "Title"
        assert len(runner.apply_calls) == 1
        assert cache.string("Title") == "Beach"

    def test_existing_list_tag_also_blocks(self, make_cache):
        cache, runner = make_cache({"Keywords": ["a"]})

        with pytest.raises(AlreadyExistsError):
            add_tag(cache, "Keywords", "b")

        assert runner.apply_calls == []

    def test_tool_failure_leaves_cache_untouched(self, make_cache):
        cache, runner = make_cache({"Rating": 3}, fail_writes=True)
        before = dict(cache.tags())

        with pytest.raises(ToolInvocationError) as exc_info:
            add_tag(cache, "Title", "Beach")

        assert "File not found" in exc_info.value.output
        assert cache.tags() == before
        assert runner.directives == ["-Title=Beach"]


class TestRemoveTag:
    """Test deleting a tag."""

    def test_remove_present_tag(self, make_cache):
        cache, runner = make_cache({"Title": "Beach", "Rating": 4})

        remove_tag(cache, "Title")

        assert "Title" not in cache.tags()
        assert cache.string("Title") == ""
        assert runner.directives == ["-Title="]

    def test_remove_list_tag(self, make_cache):
        cache, _ = make_cache({"Keywords": ["a", "b"]})

        remove_tag(cache, "Keywords")

        assert cache.string_list("Keywords") == []

    def test_remove_absent_tag_raises(self, make_cache):
        cache, runner = make_cache({})

        with pytest.raises(NotFoundError) as exc_info:
            remove_tag(cache, "Title")

        assert exc_info.value.name == "Title"
        assert runner.apply_calls == []

    def test_tool_failure_leaves_cache_untouched(self, make_cache):
        cache, _ = make_cache({"Title": "Beach"}, fail_writes=True)
        before = dict(cache.tags())

        with pytest.raises(ToolInvocationError):
            remove_tag(cache, "Title")

        assert cache.tags() == before


class TestAddTagValue:
    """Test appending to a multi-valued tag."""

    def test_absent_tag_becomes_single_element_list(self, make_cache):
        cache, runner = make_cache({})

        add_tag_value(cache, "Keywords", "sea")

        assert cache.tags()["Keywords"] == TagList(("sea",))
        assert runner.directives == ["-Keywords+=sea"]

    def test_values_append_in_order(self, make_cache):
        cache, _ = make_cache({})

        add_tag_value(cache, "Keywords", "sea")
        add_tag_value(cache, "Keywords", "sand")

        assert cache.string_list("Keywords") == ["sea", "sand"]

    def test_scalar_is_promoted_to_list(self, make_cache):
        cache, _ = make_cache({"Keywords": "x"})

        add_tag_value(cache, "Keywords", "y")

        assert cache.tags()["Keywords"] == TagList(("x", "y"))
        with pytest.raises(TypeMismatchError):
            cache.string("Keywords")

    def test_duplicates_are_kept(self, make_cache):
        cache, _ = make_cache({"Keywords": ["sea"]})

        add_tag_value(cache, "Keywords", "sea")

        assert cache.string_list("Keywords") == ["sea", "sea"]

    def test_unrecognized_shape_raises_without_invoking_tool(self, make_cache):
        cache, runner = make_cache({"RegionInfo": {"W": 10}})

        with pytest.raises(TypeMismatchError):
            add_tag_value(cache, "RegionInfo", "x")

        assert runner.apply_calls == []

    def test_tool_failure_leaves_cache_untouched(self, make_cache):
        cache, _ = make_cache({"Keywords": "x"}, fail_writes=True)
        before = dict(cache.tags())

        with pytest.raises(ToolInvocationError):
            add_tag_value(cache, "Keywords", "y")

        assert cache.tags() == before
        assert cache.tags()["Keywords"] == Scalar("x")


class TestRemoveTagValue:
    """Test removing one value from a multi-valued tag."""

    def test_removes_value(self, make_cache):
        cache, runner = make_cache({"Keywords": ["a", "b"]})

        remove_tag_value(cache, "Keywords", "a")

        assert cache.string_list("Keywords") == ["b"]
        assert runner.directives == ["-Keywords-=a"]

    def test_removes_first_occurrence_only(self, make_cache):
        cache, _ = make_cache({"Keywords": ["a", "b", "a"]})

        remove_tag_value(cache, "Keywords", "a")

        assert cache.string_list("Keywords") == ["b", "a"]

    def test_removing_last_value_keeps_empty_list(self, make_cache):
        cache, _ = make_cache({"Keywords": ["a"]})

        remove_tag_value(cache, "Keywords", "a")

        assert "Keywords" in cache.tags()
        assert cache.tags()["Keywords"] == TagList(())
        assert cache.string_list("Keywords") == []

    def test_single_remaining_value_stays_a_list(self, make_cache):
        cache, _ = make_cache({"Keywords": ["a", "b"]})

        remove_tag_value(cache, "Keywords", "b")

        assert cache.tags()["Keywords"] == TagList(("a",))

    def test_scalar_tag_becomes_list(self, make_cache):
        cache, _ = make_cache({"Keywords": "a"})

        remove_tag_value(cache, "Keywords", "a")

        assert cache.tags()["Keywords"] == TagList(())

    def test_missing_value_leaves_contents(self, make_cache):
        cache, runner = make_cache({"Keywords": ["a", "b"]})

        remove_tag_value(cache, "Keywords", "z")

        assert cache.string_list("Keywords") == ["a", "b"]
        assert runner.directives == ["-Keywords-=z"]

    def test_match_is_exact(self, make_cache):
        cache, _ = make_cache({"Keywords": ["Sea", "sea "]})

        remove_tag_value(cache, "Keywords", "sea")

        assert cache.string_list("Keywords") == ["Sea", "sea "]

    def test_absent_tag_raises(self, make_cache):
        cache, runner = make_cache({})

        with pytest.raises(NotFoundError):
            remove_tag_value(cache, "Keywords", "a")

        assert runner.apply_calls == []

    def test_unrecognized_shape_raises_without_invoking_tool(self, make_cache):
        cache, runner = make_cache({"RegionInfo": {"W": 10}})

        with pytest.raises(TypeMismatchError):
            remove_tag_value(cache, "RegionInfo", "x")

        assert runner.apply_calls == []

    def test_tool_failure_leaves_cache_untouched(self, make_cache):
        cache, _ = make_cache({"Keywords": ["a", "b"]}, fail_writes=True)
        before = dict(cache.tags())

        with pytest.raises(ToolInvocationError):
            remove_tag_value(cache, "Keywords", "a")

        assert cache.tags() == before


class TestTagCacheMutationMethods:
    """The cache's own methods delegate to the mutation operations."""

    def test_keywords_end_to_end(self, make_cache):
        cache, runner = make_cache({"Keywords": ["a", "b"]})

        cache.remove_tag_value("Keywords", "a")

        assert cache.string_list("Keywords") == ["b"]
        assert runner.apply_calls == [("-Keywords-=a", "/photos/beach.jpg")]

    def test_method_sequence(self, make_cache):
        cache, runner = make_cache({"Title": "Old"})

        cache.remove_tag("Title")
        cache.add_tag("Title", "New")
        cache.add_tag_value("Subject", "sea")
        cache.add_tag_value("Subject", "sand")
        cache.remove_tag_value("Subject", "sea")

        assert cache.tags() == {"Title": Scalar("New"), "Subject": TagList(("sand",))}
        assert runner.directives == [
            "-Title=",
            "-Title=New",
            "-Subject+=sea",
            "-Subject+=sand",
            "-Subject-=sea",
        ]

    def test_failures_in_sequence_keep_earlier_changes(self, make_cache):
        cache, runner = make_cache({})
        cache.add_tag("Title", "Beach")
        runner.fail_writes = True

        with pytest.raises(ToolInvocationError):
            cache.add_tag_value("Keywords", "sea")

        assert cache.tags() == {"Title": Scalar("Beach")}
