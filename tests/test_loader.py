from __future__ import annotations

import json
from pathlib import Path
from xml.etree import ElementTree as ET

import pytest

from jnlpgen.bundle.loader import build_bundle, load_bundle
from jnlpgen.errors import ConfigError
from jnlpgen.model.descriptors import ApplicationDesc
from jnlpgen.writer.jnlp import render_jnlp


def test_load_toml_description(tmp_path: Path, sample_toml: str) -> None:
    path = tmp_path / "app.toml"
    path.write_text(sample_toml, encoding="utf-8")

    bundle = load_bundle(path)

    assert bundle.spec == "1.0+"
    assert bundle.codebase == "http://example.com/app"
    assert bundle.output == tmp_path / "dist" / "app.jnlp"
    assert bundle.all_permissions is True
    assert bundle.kind == "application"

    information = bundle.informations[0]
    assert information.title == "App"
    assert information.offline is True
    assert information.descriptions[0].kind == "short"
    assert information.icons[0].width == 32

    resources = bundle.resources[0]
    assert resources.os == "Linux"
    assert [jar.href for jar in resources.jars] == ["app.jar", "extra.jar"]
    assert resources.jars[1].download == "lazy"
    assert resources.j2ses[0].max_heap == 268435456
    assert resources.j2ses[0].resources[0].properties[0].name == "sun.java2d.opengl"
    assert resources.packages[0].recursive is True
    assert resources.extensions[0].downloads[0].ext_part == "core"

    assert isinstance(bundle.descriptor, ApplicationDesc)
    assert bundle.descriptor.arguments == ["--fast"]


def test_loaded_description_renders(tmp_path: Path, sample_toml: str) -> None:
    path = tmp_path / "app.toml"
    path.write_text(sample_toml, encoding="utf-8")

    root = ET.fromstring(render_jnlp(load_bundle(path)))

    assert [child.tag for child in root] == [
        "information",
        "security",
        "resources",
        "application-desc",
    ]
    assert root.find("application-desc/argument").text == "--fast"


def test_load_json_description(tmp_path: Path) -> None:
    path = tmp_path / "applet.json"
    path.write_text(
        json.dumps(
            {
                "output": "/srv/applet.jnlp",
                "information": [{"title": "Applet"}],
                "applet": {
                    "main_class": "com.acme.Applet",
                    "name": "Demo",
                    "width": 200,
                    "height": 100,
                    "params": [{"name": "mode", "value": "fast"}],
                },
            }
        ),
        encoding="utf-8",
    )

    bundle = load_bundle(path)

    assert bundle.output == Path("/srv/applet.jnlp")
    assert bundle.kind == "applet"
    assert bundle.descriptor.params[0].value == "fast"


def test_component_flag() -> None:
    bundle = build_bundle({"information": [{"title": "Lib"}], "component": True})
    assert bundle.kind == "component"


def test_multiple_descriptors_rejected() -> None:
    with pytest.raises(ConfigError, match="Cannot describe multiple packages"):
        build_bundle(
            {
                "information": [{"title": "App"}],
                "application": {"main_class": "A"},
                "installer": {"main_class": "B"},
            }
        )


def test_unknown_key_rejected(tmp_path: Path) -> None:
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"information": [{"title": "App", "colour": "red"}]}), encoding="utf-8")

    with pytest.raises(ConfigError, match="Invalid bundle description"):
        load_bundle(path)


def test_malformed_toml(tmp_path: Path) -> None:
    path = tmp_path / "bad.toml"
    path.write_text("information = [", encoding="utf-8")

    with pytest.raises(ConfigError, match="Malformed bundle description"):
        load_bundle(path)


def test_unsupported_suffix(tmp_path: Path) -> None:
    path = tmp_path / "bundle.yaml"
    path.write_text("title: App", encoding="utf-8")

    with pytest.raises(ConfigError, match="Unsupported description format"):
        load_bundle(path)


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Failed to read"):
        load_bundle(tmp_path / "missing.toml")


@pytest.mark.parametrize(
    "data, message",
    [
        ({"information": {"title": "App"}}, "information must be an array of tables"),
        ({"resources": [{"jars": "app.jar"}]}, "resources.jars must be an array of tables"),
        ({"application": {"arguments": [1, 2]}}, "application.arguments must be an array of strings"),
        ({"component": "yes"}, "component must be true or false"),
    ],
)
def test_shape_errors(data, message) -> None:
    with pytest.raises(ConfigError, match=message):
        build_bundle(data)


def test_unspecified_kinds() -> None:
    bundle = build_bundle(
        {
            "information": [
                {
                    "title": "App",
                    "descriptions": [{"kind": "unspecified", "text": "General"}],
                    "icons": [{"href": "icon.png", "kind": "unspecified"}],
                }
            ],
            "component": True,
        }
    )

    element = ET.fromstring(render_jnlp(bundle)).find("information")
    assert element.find("description").attrib == {}
    assert element.find("icon").attrib == {"href": "icon.png"}


def test_bad_field_value_names_the_file(tmp_path: Path) -> None:
    path = tmp_path / "bad.json"
    path.write_text(
        json.dumps({"resources": [{"jars": [{"href": "app.jar", "download": "bogus"}]}]}),
        encoding="utf-8",
    )

    with pytest.raises(ConfigError, match="Invalid bundle description .*Invalid Jar"):
        load_bundle(path)
