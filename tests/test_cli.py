"""CLI tests: catalog loading, predicate building, and output."""

import json

import pytest

from specfilter.config.runtime import get_settings
from specfilter.domain.predicates import AndPredicate, NotPredicate, OrPredicate
from specfilter.interface.cli import build_predicate, load_products, main

_CATALOG = [
    {"name": "Apple", "color": "green", "size": "small"},
    {"name": "Tree", "color": "green", "size": "large"},
    {"name": "House", "color": "blue", "size": "large"},
]


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def catalog_file(tmp_path):
    path = tmp_path / "products.json"
    path.write_text(json.dumps(_CATALOG), encoding="utf-8")
    return path


def _run(capsys, *argv: str) -> str:
    main(list(argv))
    return capsys.readouterr().out


class TestLoadProducts:
    def test_loads_in_file_order(self, catalog_file):
        products = load_products(catalog_file)
        assert [p.name for p in products] == ["Apple", "Tree", "House"]

    def test_missing_file_exits(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            load_products(tmp_path / "nope.json")
        assert exc_info.value.code == 1
        assert "catalog file not found" in capsys.readouterr().err

    def test_non_list_json_exits(self, tmp_path, capsys):
        path = tmp_path / "obj.json"
        path.write_text('{"name": "Apple"}', encoding="utf-8")
        with pytest.raises(SystemExit):
            load_products(path)
        assert "must contain a list" in capsys.readouterr().err

    def test_malformed_json_exits(self, tmp_path, capsys):
        path = tmp_path / "bad.json"
        path.write_text("[{", encoding="utf-8")
        with pytest.raises(SystemExit):
            load_products(path)
        assert "invalid JSON" in capsys.readouterr().err

    def test_invalid_product_reports_index(self, tmp_path, capsys):
        path = tmp_path / "bad_product.json"
        path.write_text(
            json.dumps([_CATALOG[0], {"name": "Lamp", "color": "purple", "size": "small"}]),
            encoding="utf-8",
        )
        with pytest.raises(SystemExit):
            load_products(path)
        assert "invalid product at index 1" in capsys.readouterr().err

    def test_non_utf8_catalog_exits(self, tmp_path, capsys):
        path = tmp_path / "latin1.json"
        path.write_bytes(b'[{"name": "\xff\xfe", "color": "green", "size": "small"}]')
        with pytest.raises(SystemExit) as exc_info:
            load_products(path)
        assert exc_info.value.code == 1
        assert "invalid JSON" in capsys.readouterr().err

    def test_directory_path_exits(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            load_products(tmp_path)
        assert exc_info.value.code == 1
        assert "cannot read catalog file" in capsys.readouterr().err


class TestBuildPredicate:
    def test_all_builds_and(self):
        assert isinstance(build_predicate(["green"], ["large"]), AndPredicate)

    def test_any_builds_or(self):
        assert isinstance(build_predicate(["blue"], ["small"], match="any"), OrPredicate)

    def test_negate_wraps_in_not(self):
        assert isinstance(build_predicate(["green"], [], negate=True), NotPredicate)

    def test_one_leaf_per_value(self):
        spec = build_predicate(["green", "blue"], ["large"], match="any")
        assert len(spec.children) == 3


class TestFilterCommand:
    def test_by_color(self, capsys, catalog_file):
        out = _run(capsys, "filter", "--file", str(catalog_file), "--color", "green")
        assert out.splitlines() == ["Apple", "Tree"]

    def test_all_criteria(self, capsys, catalog_file):
        out = _run(capsys, "filter", "--file", str(catalog_file), "--color", "green", "--size", "large")
        assert out.splitlines() == ["Tree"]

    def test_any_criteria(self, capsys, catalog_file):
        out = _run(
            capsys, "filter", "--file", str(catalog_file),
            "--color", "blue", "--size", "small", "--match", "any",
        )
        assert out.splitlines() == ["Apple", "House"]

    def test_negate(self, capsys, catalog_file):
        out = _run(capsys, "filter", "--file", str(catalog_file), "--color", "green", "--negate")
        assert out.splitlines() == ["House"]

    def test_no_criteria_all_keeps_everything(self, capsys, catalog_file):
        out = _run(capsys, "filter", "--file", str(catalog_file))
        assert out.splitlines() == ["Apple", "Tree", "House"]

    def test_no_criteria_any_keeps_nothing(self, capsys, catalog_file):
        out = _run(capsys, "filter", "--file", str(catalog_file), "--match", "any")
        assert out == ""

    def test_json_output(self, capsys, catalog_file):
        out = _run(capsys, "filter", "--file", str(catalog_file), "--size", "large", "--json")
        assert json.loads(out) == _CATALOG[1:]

    def test_unknown_color_exits(self, capsys, catalog_file):
        with pytest.raises(SystemExit) as exc_info:
            main(["filter", "--file", str(catalog_file), "--color", "purple"])
        assert exc_info.value.code == 1
        assert "unknown color" in capsys.readouterr().err

    def test_default_catalog_from_settings(self, capsys, catalog_file, monkeypatch):
        monkeypatch.setenv("SPECFILTER_CATALOG_PATH", str(catalog_file))
        out = _run(capsys, "filter", "--color", "blue")
        assert out.splitlines() == ["House"]


class TestListCommand:
    def test_lists_every_product(self, capsys, catalog_file):
        out = _run(capsys, "list", "--file", str(catalog_file))
        assert out.splitlines() == [
            "Apple (green, small)",
            "Tree (green, large)",
            "House (blue, large)",
        ]

    def test_no_command_prints_help(self, capsys):
        out = _run(capsys)
        assert "usage" in out.lower()


class TestInvalidSettings:
    def test_bad_log_level_exits(self, capsys, catalog_file, monkeypatch):
        monkeypatch.setenv("SPECFILTER_LOG_LEVEL", "chatty")
        with pytest.raises(SystemExit) as exc_info:
            main(["list", "--file", str(catalog_file)])
        assert exc_info.value.code == 1
        assert "Error: invalid SPECFILTER_ settings" in capsys.readouterr().err
