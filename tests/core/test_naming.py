"""Tests for package-name validation and normalization."""

from __future__ import annotations

import pytest

from pandagen.core.naming import (
    INVALID_PACKAGE_NAME,
    format_target_dir,
    is_valid_package_name,
    to_valid_package_name,
    validate_package_name_answer,
    validate_project_name_answer,
)


class TestIsValidPackageName:
    @pytest.mark.parametrize(
        "name",
        ["my-app", "a", "panda.magic", "under_score", "tilde~name", "@scope/pkg", "@my-org/my.pkg", "123"],
    )
    def test_accepts_registry_names(self, name: str) -> None:
        assert is_valid_package_name(name) is True

    @pytest.mark.parametrize(
        "name",
        ["", "My-App", "my app", ".hidden", "_private", "@scope/.pkg", "@scope/", "a/b", "name!", "my-app\n"],
    )
    def test_rejects_invalid_names(self, name: str) -> None:
        assert is_valid_package_name(name) is False


class TestToValidPackageName:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("My App", "my-app"),
            ("  Spaced   Out  ", "spaced-out"),
            (".hidden", "hidden"),
            ("__init", "init"),
            ("@scope/Name", "-scope-name"),
            ("hello.world", "hello-world"),
            ("Crème Brûlée", "cr-me-br-l-e"),
            ("keep~tilde", "keep~tilde"),
        ],
    )
    def test_normalizes(self, raw: str, expected: str) -> None:
        assert to_valid_package_name(raw) == expected

    @pytest.mark.parametrize(
        "raw",
        ["My App", "!!!", "._weird", "UPPER_case.name", "tabs\tand\nnewlines", "@@@", "a/b/c", "-dash-", "中文"],
    )
    def test_normalized_output_is_valid(self, raw: str) -> None:
        normalized = to_valid_package_name(raw)
        assert normalized
        assert is_valid_package_name(normalized)

    @pytest.mark.parametrize("raw", ["", "   ", ".", "_", "._"])
    def test_empty_normalization_is_not_valid(self, raw: str) -> None:
        normalized = to_valid_package_name(raw)
        assert normalized == ""
        assert is_valid_package_name(normalized) is False


class TestPromptValidators:
    def test_package_name_answer_accepts_valid(self) -> None:
        assert validate_package_name_answer("my-pkg") is True

    def test_package_name_answer_accepts_blank(self) -> None:
        assert validate_package_name_answer("   ") is True

    def test_package_name_answer_rejects_invalid(self) -> None:
        assert validate_package_name_answer("Not Valid") == INVALID_PACKAGE_NAME

    def test_package_name_answer_rejects_blank_without_fallback(self) -> None:
        assert validate_package_name_answer("  ", allow_blank=False) == INVALID_PACKAGE_NAME
        assert validate_package_name_answer("my-pkg", allow_blank=False) is True

    def test_project_name_answer_requires_value(self) -> None:
        assert validate_project_name_answer("  ") == "Project name is required"
        assert validate_project_name_answer("app") is True


class TestFormatTargetDir:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("my-app", "my-app"), ("  my-app  ", "my-app"), ("my-app///", "my-app"), ("My App/", "My App"), (None, "")],
    )
    def test_trims(self, raw: str | None, expected: str) -> None:
        assert format_target_dir(raw) == expected
