import io
import json
import xml.etree.ElementTree as ET

import pytest

from sitecrawler.sitemap import SiteMap, export_site_map, print_site_map

ROOT = "https://example.com"


@pytest.fixture
def tree():
    about = SiteMap(ROOT + "/about", 1, [SiteMap(ROOT + "/contact", 2)])
    blog = SiteMap(ROOT + "/blog", 1)
    return SiteMap(ROOT, 0, [about, blog])


def test_dump_leaf():
    assert SiteMap(ROOT).dump() == "{URL: https://example.com, Depth: 0, Children: []}"


def test_dump_contains_every_url(tree):
    text = tree.dump()
    for url in (ROOT + "/about", ROOT + "/blog", ROOT + "/contact"):
        assert f"URL: {url}," in text
    assert text.count("{") == text.count("}") == 4


def test_to_dict_leaf_children_are_none():
    data = SiteMap(ROOT).to_dict()
    assert data["url"] == ROOT
    assert data["depth"] == 0
    assert data["children"] is None


def test_to_dict_nested(tree):
    data = tree.to_dict()
    assert [child["url"] for child in data["children"]] == [ROOT + "/about", ROOT + "/blog"]
    assert data["children"][0]["children"][0]["depth"] == 2
    assert data["children"][1]["children"] is None


def test_print_site_map(tree):
    buf = io.StringIO()
    print_site_map(tree, buf)
    assert buf.getvalue() == (
        "- https://example.com\n"
        "  - https://example.com/about\n"
        "    - https://example.com/contact\n"
        "  - https://example.com/blog\n"
    )


def test_print_none_writes_nothing():
    buf = io.StringIO()
    print_site_map(None, buf)
    assert buf.getvalue() == ""


def test_export_json_round_trip(tree, tmp_path):
    target = tmp_path / "map.json"
    export_site_map(tree, target, "json")
    assert json.loads(target.read_text(encoding="utf-8")) == tree.to_dict()


def test_export_json_escapes_html_characters(tmp_path):
    url = ROOT + "/?a=<b>&c"
    target = tmp_path / "map.json"
    export_site_map(SiteMap(url), target, "json")
    raw = target.read_text(encoding="utf-8")
    assert "<" not in raw and ">" not in raw and "&" not in raw
    assert json.loads(raw)["url"] == url


def test_export_xml_structure(tree, tmp_path):
    target = tmp_path / "map.xml"
    export_site_map(tree, target, "xml")
    root = ET.fromstring(target.read_text(encoding="utf-8"))
    assert root.tag == "SiteMap"
    assert root.findtext("URL") == ROOT
    assert root.findtext("Depth") == "0"
    children = root.findall("Children")
    assert [child.findtext("URL") for child in children] == [ROOT + "/about", ROOT + "/blog"]
    assert children[0].find("Children").findtext("URL") == ROOT + "/contact"
    assert children[1].find("Children") is None


def test_xml_escaping_round_trip():
    url = ROOT + "/?q=\"x\"&y='<z>'"
    root = ET.fromstring(SiteMap(url).to_xml())
    assert root.findtext("URL") == url


def test_xml_is_indented(tree):
    lines = tree.to_xml().splitlines()
    assert lines[0] == "<SiteMap>"
    assert lines[-1] == "</SiteMap>"
    assert all(line.startswith("  ") for line in lines[1:-1])


def test_unsupported_format(tree, tmp_path):
    target = tmp_path / "map.out"
    with pytest.raises(ValueError, match="unsupported format: yaml"):
        export_site_map(tree, target, "yaml")
    assert not target.exists()


def test_export_none_raises(tmp_path):
    target = tmp_path / "map.json"
    with pytest.raises(ValueError, match="site map is nil"):
        export_site_map(None, target, "json")
    assert not target.exists()