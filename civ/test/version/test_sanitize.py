from __future__ import annotations

import pytest

from civ.version.sanitize import sanitize_branch_name


@pytest.mark.parametrize("branch", ["main", "master", "develop"])
def test_trunk_branches_map_to_dev(branch: str) -> None:
    assert sanitize_branch_name(branch) == "dev"


def test_trunk_match_is_exact() -> None:
    assert sanitize_branch_name("Main") == "Main"
    assert sanitize_branch_name("main-fix") == "main.fix"


def test_splits_on_separators() -> None:
    assert sanitize_branch_name("feature/my-fave-feature") == "feature.my.fave.feature"
    assert sanitize_branch_name("foo_bar") == "foo.bar"
    assert sanitize_branch_name("a\\b.c") == "a.b.c"


def test_strips_special_characters_and_separators() -> None:
    assert (
        sanitize_branch_name("feature/£-foo-bar\\blort-1234.99")
        == "feature.foo.bar.blort.1234.99"
    )


def test_only_first_special_character_per_fragment_is_removed() -> None:
    assert sanitize_branch_name("a$b%c") == "ab%c"
    assert sanitize_branch_name("fix/#12") == "fix.12"


def test_leading_zeros_are_stripped() -> None:
    assert sanitize_branch_name("0042-fix") == "42.fix"
    assert sanitize_branch_name("release/000") == "release"


def test_placeholder_when_nothing_survives() -> None:
    assert sanitize_branch_name("---") == "branch"
    assert sanitize_branch_name("") == "branch"
    assert sanitize_branch_name("0/00") == "branch"
