from __future__ import annotations

import pytest

from jnlpgen.bundle.assembler import JnlpBundle


@pytest.fixture()
def app_bundle() -> JnlpBundle:
    bundle = JnlpBundle()
    bundle.add_information(title="App", vendor="Acme")
    bundle.add_resources().add_jar(href="app.jar", main=True)
    bundle.add_application_desc(main_class="com.acme.Main")
    return bundle


@pytest.fixture()
def sample_toml() -> str:
    return """
codebase = "http://example.com/app"
href = "app.jnlp"
output = "dist/app.jnlp"
all_permissions = true

[[information]]
title = "App"
vendor = "Acme"
homepage = "http://example.com"
offline = true

[[information.descriptions]]
kind = "short"
text = "A sample app"

[[information.icons]]
href = "icon.png"
width = 32
height = 32

[[resources]]
os = "Linux"

[[resources.j2se]]
version = "1.6+"
max_heap = 268435456

[[resources.j2se.resources]]
[[resources.j2se.resources.properties]]
name = "sun.java2d.opengl"
value = "true"

[[resources.jars]]
href = "app.jar"
main = true

[[resources.jars]]
href = "extra.jar"
download = "lazy"
part = "extra"

[[resources.packages]]
name = "com.acme.extra.*"
part = "extra"
recursive = true

[[resources.extensions]]
href = "ext.jnlp"

[[resources.extensions.downloads]]
ext_part = "core"

[application]
main_class = "com.acme.Main"
arguments = ["--fast"]
""".lstrip()
