import json
import math

import pytest

from skylines.export import render_module, to_payload, write_constellations
from skylines.types import ConstellationData, Star


def sample_data():
    stars = [Star(ra=0.0, dec=math.pi / 2), Star(ra=math.pi, dec=math.pi / 2), Star(ra=1.0, dec=0.25)]
    return ConstellationData(stars=stars, points=[0, 1, 1, 2])


def test_payload_shape():
    payload = to_payload(sample_data())
    assert set(payload) == {"s", "l"}
    assert payload["l"] == [[0, 1], [1, 2]]
    assert payload["s"][0] == [0.0, 1.570796]
    assert payload["s"][1] == [3.141593, 1.570796]


def test_payload_full_precision():
    payload = to_payload(sample_data(), precision=None)
    assert payload["s"][1] == [math.pi, math.pi / 2]


def test_empty_payload():
    payload = to_payload(ConstellationData(stars=[], points=[]))
    assert payload == {"s": [], "l": []}


def test_odd_point_count_is_rejected():
    with pytest.raises(ValueError):
        to_payload(ConstellationData(stars=[Star(0.0, 0.0)], points=[0]))


def test_render_module_is_compact_commonjs():
    text = render_module(sample_data())
    assert text.startswith("module.exports={")
    assert " " not in text
    payload = json.loads(text[len("module.exports="):])
    assert payload["l"] == [[0, 1], [1, 2]]


def test_render_module_prefix():
    text = render_module(sample_data(), prefix="export default ")
    assert text.startswith("export default {")


def test_write_constellations(tmp_path):
    out = write_constellations(tmp_path / "constellations.js", sample_data())
    assert out.read_text(encoding="utf-8") == render_module(sample_data())


def test_lines_reject_unpaired_endpoint():
    with pytest.raises(ValueError):
        ConstellationData(stars=[Star(0.0, 0.0)], points=[0, 0, 0]).lines
