"""Tests for jsonapi_obscurity.rewriter: applies, validate, rewrite, resolve."""

import pytest

from jsonapi_obscurity.config import ObscurityConfig, normalize_prefix
from jsonapi_obscurity.errors import PrefixMismatch
from jsonapi_obscurity.languages import LanguageCodeSet
from jsonapi_obscurity.rewriter import PathRewriter, ValidationOutcome

UUID = "8d4a3b9e-6a0f-4c64-9d1f-2f1f3f0b7c11"
NODE = f"/node/page/{UUID}"


@pytest.fixture
def rewriter() -> PathRewriter:
    return PathRewriter(
        ObscurityConfig(api_base_path="/jsonapi", prefix="/secret"),
        LanguageCodeSet.configured(["de", "en"]),
    )


class TestScenario:
    """A page node requested with correct, missing and wrong prefixes."""

    def test_no_prefix_is_rejected(self, rewriter: PathRewriter) -> None:
        path = f"/jsonapi{NODE}"
        assert rewriter.validate(path) is ValidationOutcome.NOT_FOUND
        with pytest.raises(PrefixMismatch):
            rewriter.resolve(path)

    def test_correct_prefix_is_rewritten(self, rewriter: PathRewriter) -> None:
        assert rewriter.resolve(f"/secret/jsonapi{NODE}") == f"/jsonapi{NODE}"

    def test_random_prefix_is_not_valid(self, rewriter: PathRewriter) -> None:
        path = f"/randomXYZ/jsonapi{NODE}"
        assert rewriter.validate(path) is ValidationOutcome.NOT_FOUND

    def test_random_prefix_and_unknown_code_is_not_valid(self, rewriter: PathRewriter) -> None:
        path = f"/randomXYZ/xx/jsonapi{NODE}"
        assert rewriter.validate(path) is ValidationOutcome.NOT_FOUND

    def test_correct_prefix_and_langcode_keeps_langcode(self, rewriter: PathRewriter) -> None:
        assert rewriter.resolve(f"/secret/de/jsonapi{NODE}") == f"/de/jsonapi{NODE}"

    def test_random_prefix_and_langcode_is_not_valid(self, rewriter: PathRewriter) -> None:
        path = f"/randomXYZ/de/jsonapi{NODE}"
        assert rewriter.validate(path) is ValidationOutcome.NOT_FOUND


class TestApplies:
    def test_disabled_when_prefix_empty(self) -> None:
        rewriter = PathRewriter(ObscurityConfig(prefix=""), LanguageCodeSet.standard())
        assert rewriter.applies(f"/jsonapi{NODE}") is False
        assert rewriter.resolve(f"/jsonapi{NODE}") == f"/jsonapi{NODE}"

    @pytest.mark.parametrize(
        "path",
        [
            "/",
            "/node/1",
            "/secret/node/1",
            "/jsonapi",
            "/secret/jsonapi",
            "/jsonapifoo/node",
            "/secret/jsonapifoo/node",
            "/api/jsonapi-extra/node",
        ],
    )
    def test_non_api_paths_do_not_apply(self, rewriter: PathRewriter, path: str) -> None:
        assert rewriter.applies(path) is False
        assert rewriter.resolve(path) == path

    @pytest.mark.parametrize(
        "path",
        [
            "/jsonapi/node",
            "/secret/jsonapi/node",
            "/secret/de/jsonapi/node",
            "/de/jsonapi/node",
            "/secret/en/jsonapi/",
        ],
    )
    def test_api_paths_apply(self, rewriter: PathRewriter, path: str) -> None:
        assert rewriter.applies(path) is True

    def test_unknown_segment_before_base_path_does_not_apply(
        self, rewriter: PathRewriter
    ) -> None:
        # Not a language code, so the base path is not at the front
        assert rewriter.applies("/secret/xx/jsonapi/node") is False

    def test_language_segment_needs_following_segment(self, rewriter: PathRewriter) -> None:
        assert rewriter.plain_path("/secret/de") == "/de"
        assert rewriter.plain_path("/secret/de/jsonapi/node") == "/jsonapi/node"


class TestValidate:
    def test_exact_prefix(self, rewriter: PathRewriter) -> None:
        assert rewriter.validate("/secret/jsonapi/node") is ValidationOutcome.VALID

    def test_prefix_and_registered_langcode(self, rewriter: PathRewriter) -> None:
        assert rewriter.validate("/secret/en/jsonapi/node") is ValidationOutcome.VALID

    @pytest.mark.parametrize(
        "path",
        [
            "/secret/fr/jsonapi/node",  # standard code, not configured
            "/secret/xx/jsonapi/node",
            "/secre/jsonapi/node",
            "/secret/secret/jsonapi/node",
            "/secret/de/de/jsonapi/node",
            "/de/jsonapi/node",
            "/de/secret/jsonapi/node",
            "/prefix/secret/jsonapi/node",
            "/secret/node",
        ],
    )
    def test_everything_else_is_not_found(self, rewriter: PathRewriter, path: str) -> None:
        assert rewriter.validate(path) is ValidationOutcome.NOT_FOUND

    def test_langcode_is_last_segment_of_multi_segment_prefix(self) -> None:
        rewriter = PathRewriter(
            ObscurityConfig(prefix="/a/b"),
            LanguageCodeSet.configured(["de"]),
        )
        assert rewriter.validate("/a/b/de/jsonapi/node") is ValidationOutcome.VALID
        assert rewriter.validate("/a/b/jsonapi/node") is ValidationOutcome.VALID
        assert rewriter.validate("/a/de/jsonapi/node") is ValidationOutcome.NOT_FOUND
        assert rewriter.resolve("/a/b/de/jsonapi/node") == "/de/jsonapi/node"

    def test_prefix_containing_base_path_name(self) -> None:
        rewriter = PathRewriter(
            ObscurityConfig(prefix="/jsonapi-hidden"),
            LanguageCodeSet.standard(),
        )
        assert rewriter.validate("/jsonapi-hidden/jsonapi/node") is ValidationOutcome.VALID
        assert rewriter.resolve("/jsonapi-hidden/jsonapi/node") == "/jsonapi/node"

    def test_standard_table_accepts_any_standard_code(self) -> None:
        rewriter = PathRewriter(ObscurityConfig(prefix="/secret"), LanguageCodeSet.standard())
        assert rewriter.resolve("/secret/fr/jsonapi/node") == "/fr/jsonapi/node"
        assert rewriter.resolve("/secret/pt-br/jsonapi/node") == "/pt-br/jsonapi/node"


class TestRewrite:
    def test_prefix_anchored(self, rewriter: PathRewriter) -> None:
        assert rewriter.rewrite("/secret/jsonapi/secret/x") == "/jsonapi/secret/x"

    def test_later_occurrence_untouched(self, rewriter: PathRewriter) -> None:
        assert rewriter.rewrite("/jsonapi/secret/x") == "/jsonapi/secret/x"

    def test_language_segment_preserved(self, rewriter: PathRewriter) -> None:
        assert rewriter.rewrite("/secret/de/jsonapi/x") == "/de/jsonapi/x"

    def test_encoded_tail_preserved(self, rewriter: PathRewriter) -> None:
        assert rewriter.rewrite("/secret/jsonapi/x%20y") == "/jsonapi/x%20y"

    def test_exact_prefix_becomes_empty(self, rewriter: PathRewriter) -> None:
        assert rewriter.rewrite("/secret") == ""

    def test_prefix_given_without_slash(self) -> None:
        rewriter = PathRewriter(ObscurityConfig(prefix="secret/"), LanguageCodeSet.standard())
        assert rewriter.resolve("/secret/jsonapi/node") == "/jsonapi/node"


class TestResolve:
    def test_mismatch_detail_is_generic(self, rewriter: PathRewriter) -> None:
        with pytest.raises(PrefixMismatch) as wrong_prefix:
            rewriter.resolve("/jsonapi/node")
        with pytest.raises(PrefixMismatch) as wrong_lang:
            rewriter.resolve("/de/jsonapi/node")
        assert str(wrong_prefix.value) == str(wrong_lang.value) == "404: Not Found"

    def test_languages_default_from_config(self) -> None:
        config = ObscurityConfig(
            prefix="/secret", languages=("de",), language_policy="configured"
        )
        rewriter = PathRewriter(config)
        assert rewriter.resolve("/secret/de/jsonapi/node") == "/de/jsonapi/node"
        # "en" is not configured here, so the base path is not at the front
        assert rewriter.validate("/secret/en/jsonapi/node") is ValidationOutcome.NOT_FOUND
        assert rewriter.resolve("/secret/en/jsonapi/node") == "/secret/en/jsonapi/node"

    def test_custom_base_path(self) -> None:
        rewriter = PathRewriter(
            ObscurityConfig(api_base_path="/api/v1", prefix="/hidden"),
            LanguageCodeSet.standard(),
        )
        assert rewriter.resolve("/hidden/api/v1/items") == "/api/v1/items"
        assert rewriter.resolve("/hidden/en/api/v1/items") == "/en/api/v1/items"
        with pytest.raises(PrefixMismatch):
            rewriter.resolve("/api/v1/items")


def test_normalize_prefix_idempotent() -> None:
    for raw in ("secret", "/secret", "secret/", "//secret//", "/a/b/", "", "/"):
        once = normalize_prefix(raw)
        assert normalize_prefix(once) == once
