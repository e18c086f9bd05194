"""Unit tests for import pruning."""

from mockgen_core.imports import prune_imports, unquote_import_path
from mockgen_core.models import ImportEntry


class TestUnquoteImportPath:
    def test_interpreted_string(self):
        assert unquote_import_path('"net/http"') == "net/http"

    def test_raw_string(self):
        assert unquote_import_path("`net/http`") == "net/http"

    def test_unquoted_text_unchanged(self):
        assert unquote_import_path("net/http") == "net/http"


class TestPruneImports:
    def test_keeps_used_imports_in_file_order(self):
        imports = [
            ImportEntry(path="io"),
            ImportEntry(path="os"),
            ImportEntry(path="os", alias="osfs"),
            ImportEntry(path="github.com/x/extrapkg"),
        ]
        retained = prune_imports(imports, {"extrapkg", "io", "osfs"})
        assert retained == [
            ImportEntry(path="io"),
            ImportEntry(path="os", alias="osfs"),
            ImportEntry(path="github.com/x/extrapkg"),
        ]

    def test_nothing_used(self):
        assert prune_imports([ImportEntry(path="fmt")], set()) == []

    def test_dot_and_blank_imports_are_dropped(self):
        imports = [
            ImportEntry(path="strings", alias="."),
            ImportEntry(path="embed", alias="_"),
        ]
        assert prune_imports(imports, {"strings", "embed"}) == []

    def test_duplicate_short_names_are_both_kept(self):
        imports = [
            ImportEntry(path="crypto/rand"),
            ImportEntry(path="math/rand"),
        ]
        assert prune_imports(imports, {"rand"}) == imports
