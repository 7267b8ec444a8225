import json
import logging
import tomllib
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional

from jnlpgen.bundle.assembler import JnlpBundle
from jnlpgen.errors import ConfigError
from jnlpgen.model.resources import Resources

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = {".toml", ".json"}


def load_bundle(path: Path) -> JnlpBundle:
    """Read a TOML or JSON bundle description and assemble it.

    A relative ``output`` is resolved against the directory holding the
    description file.
    """

    data = _read_description(path)

    try:
        bundle = build_bundle(data, base_dir=path.parent)
    except ConfigError as exc:
        raise ConfigError(
            f"Invalid bundle description {path}: {exc}"
        ) from exc

    logger.debug("Loaded %s bundle description from %s", bundle.kind, path)
    return bundle


def build_bundle(
    data: Mapping[str, Any],
    *,
    base_dir: Optional[Path] = None,
) -> JnlpBundle:
    data = dict(data)

    informations = _tables(data.pop("information", []), "information")
    resources = _tables(data.pop("resources", []), "resources")
    component = data.pop("component", False)
    application = data.pop("application", None)
    applet = data.pop("applet", None)
    installer = data.pop("installer", None)

    bundle = JnlpBundle(**data)
    if base_dir is not None and bundle.output is not None:
        if not bundle.output.is_absolute():
            bundle.output = base_dir / bundle.output

    for entry in informations:
        _build_information(bundle, entry)

    for entry in resources:
        _build_resources(bundle.add_resources, entry, "resources")

    if not isinstance(component, bool):
        raise ConfigError("component must be true or false")
    bundle.set_component(component)

    if application is not None:
        application = _table(application, "application")
        arguments = _strings(application.pop("arguments", []), "application.arguments")
        desc = bundle.add_application_desc(**application)
        for argument in arguments:
            desc.add_argument(argument)

    if applet is not None:
        applet = _table(applet, "applet")
        params = _tables(applet.pop("params", []), "applet.params")
        desc = bundle.add_applet_desc(**applet)
        for param in params:
            desc.add_param(**param)

    if installer is not None:
        bundle.add_installer_desc(**_table(installer, "installer"))

    return bundle


def _read_description(path: Path) -> Dict[str, Any]:
    if path.suffix not in SUPPORTED_SUFFIXES:
        raise ConfigError(
            f"Unsupported description format: {path.suffix or path.name} "
            f"(supported: {', '.join(sorted(SUPPORTED_SUFFIXES))})"
        )

    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise ConfigError(
            f"Failed to read bundle description: {path}"
        ) from exc

    try:
        if path.suffix == ".toml":
            data = tomllib.loads(raw.decode("utf-8"))
        else:
            data = json.loads(raw)
    except (tomllib.TOMLDecodeError, json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ConfigError(
            f"Malformed bundle description {path}: {exc}"
        ) from exc

    return _table(data, "bundle description")


def _build_information(bundle: JnlpBundle, entry: Dict[str, Any]) -> None:
    descriptions = _tables(entry.pop("descriptions", []), "information.descriptions")
    icons = _tables(entry.pop("icons", []), "information.icons")

    information = bundle.add_information(**entry)
    for description in descriptions:
        information.add_description(**description)
    for icon in icons:
        information.add_icon(**icon)


def _build_resources(
    factory: Callable[..., Resources],
    entry: Dict[str, Any],
    where: str,
) -> None:
    j2ses = _tables(entry.pop("j2se", []), f"{where}.j2se")
    jars = _tables(entry.pop("jars", []), f"{where}.jars")
    native_libs = _tables(entry.pop("native_libs", []), f"{where}.native_libs")
    extensions = _tables(entry.pop("extensions", []), f"{where}.extensions")
    properties = _tables(entry.pop("properties", []), f"{where}.properties")
    packages = _tables(entry.pop("packages", []), f"{where}.packages")

    resources = factory(**entry)

    for j2se_entry in j2ses:
        nested = _tables(j2se_entry.pop("resources", []), f"{where}.j2se.resources")
        j2se = resources.add_j2se(**j2se_entry)
        for nested_entry in nested:
            _build_resources(j2se.add_resources, nested_entry, f"{where}.j2se.resources")

    for jar in jars:
        resources.add_jar(**jar)
    for native_lib in native_libs:
        resources.add_native_lib(**native_lib)

    for extension_entry in extensions:
        downloads = _tables(
            extension_entry.pop("downloads", []), f"{where}.extensions.downloads"
        )
        extension = resources.add_extension(**extension_entry)
        for download in downloads:
            extension.add_download(**download)

    for prop in properties:
        resources.add_property(**prop)
    for package in packages:
        resources.add_package(**package)


def _table(value: Any, where: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise ConfigError(f"{where} must be a table")
    return dict(value)


def _tables(value: Any, where: str) -> List[Dict[str, Any]]:
    if not isinstance(value, list):
        raise ConfigError(f"{where} must be an array of tables")
    return [_table(item, where) for item in value]


def _strings(value: Any, where: str) -> List[str]:
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{where} must be an array of strings")
    return list(value)
