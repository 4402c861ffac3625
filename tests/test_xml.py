import pytest

from pivk.xml import XmlNode, XmlSyntaxError, parse_file, parse_text

DOC = """<?xml version="1.0" encoding="utf-8"?>
<COLLADA xmlns="http://www.collada.org/2005/11/COLLADASchema" version="1.4.1">
  <library_geometries>
    <geometry id="Cube-mesh" name="Cube">
      <mesh>
        <source id="Cube-mesh-positions">
          <float_array id="Cube-mesh-positions-array" count="6">1 1 1 1 -1 1</float_array>
        </source>
        <source id="Cube-mesh-normals"/>
      </mesh>
    </geometry>
    <geometry id="Plane-mesh" name="Plane"/>
  </library_geometries>
</COLLADA>
"""


def test_root_and_attributes():
    nodes = parse_text(DOC)
    assert [n.name for n in nodes] == ["COLLADA"]
    assert nodes[0].args["version"] == "1.4.1"
    assert nodes[0].args["xmlns"] == "http://www.collada.org/2005/11/COLLADASchema"


def test_find_elem_and_elems():
    root = parse_text(DOC)[0]
    lib = root.find_elem("library_geometries")
    geoms = lib.find_elems("geometry")
    assert [g.args["name"] for g in geoms] == ["Cube", "Plane"]
    assert lib.find_elem("geometry") is geoms[0]
    assert root.find_elem("missing") is None
    assert root.find_elems("missing") == []


def test_data_and_nested():
    root = parse_text(DOC)[0]
    mesh = root.find_elem("library_geometries").find_elem("geometry").find_elem("mesh")
    sources = mesh.find_elems("source")
    assert len(sources) == 2
    arr = sources[0].find_elem("float_array")
    assert arr.data == "1 1 1 1 -1 1"
    assert arr.args["count"] == "6"


def test_self_closing_has_no_children():
    root = parse_text(DOC)[0]
    plane = root.find_elem("library_geometries").find_elems("geometry")[1]
    assert plane.sub_nodes == []
    assert plane.data == ""
    assert plane.args == {"id": "Plane-mesh", "name": "Plane"}


def test_trailing_data_whitespace_kept():
    nodes = parse_text("<?xml?>\n<a>hello </a>")
    assert nodes == [XmlNode("a", {}, [], "hello ")]


def test_siblings_at_top_level():
    nodes = parse_text("decl\n<a/>\n<b>x</b>")
    assert [n.name for n in nodes] == ["a", "b"]
    assert nodes[1].data == "x"


def test_first_line_is_skipped():
    nodes = parse_text("<skipped>\n<kept/>")
    assert [n.name for n in nodes] == ["kept"]


def test_missing_declaration_line():
    with pytest.raises(XmlSyntaxError):
        parse_text("<a/>")


def test_unterminated_data():
    with pytest.raises(XmlSyntaxError):
        parse_text("decl\n<a>text without end")


def test_unterminated_attribute():
    with pytest.raises(XmlSyntaxError):
        parse_text('decl\n<a x="1')


def test_parse_file_matches_text(tmp_path):
    path = tmp_path / "scene.dae"
    path.write_text(DOC, encoding="utf-8")
    assert parse_file(path) == parse_text(DOC)