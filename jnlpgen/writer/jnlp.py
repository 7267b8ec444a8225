"""JNLP document serializer.

Walks a :class:`~jnlpgen.bundle.assembler.JnlpBundle` in the order JNLP
clients expect and streams it through :class:`~jnlpgen.writer.xml_writer.XmlWriter`.
Attributes holding their implicit default (unset, ``0`` or ``False``) are
left out of the output. Elements missing a required attribute abort the
whole write with :class:`~jnlpgen.errors.MissingAttributeError`.
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import BinaryIO, Dict, Optional, Union
from xml.sax import SAXException

from jnlpgen.bundle.assembler import JnlpBundle
from jnlpgen.errors import BuildError, MissingAttributeError
from jnlpgen.model.descriptors import AppletDesc, ApplicationDesc, InstallerDesc
from jnlpgen.model.information import Description, Icon, Information
from jnlpgen.model.resources import (
    ExtDownload,
    Extension,
    J2se,
    Jar,
    NativeLib,
    Package,
    Property,
    Resources,
)
from jnlpgen.utils.fs import open_output
from jnlpgen.writer.constants import (
    ATTR_ARCH,
    ATTR_CODEBASE,
    ATTR_DEPTH,
    ATTR_DOCUMENT_BASE,
    ATTR_DOWNLOAD,
    ATTR_EXT_PART,
    ATTR_HEIGHT,
    ATTR_HREF,
    ATTR_INITIAL_HEAP,
    ATTR_KIND,
    ATTR_LOCALE,
    ATTR_MAIN,
    ATTR_MAIN_CLASS,
    ATTR_MAX_HEAP,
    ATTR_NAME,
    ATTR_OS,
    ATTR_PART,
    ATTR_RECURSIVE,
    ATTR_SIZE,
    ATTR_SPEC,
    ATTR_VALUE,
    ATTR_VERSION,
    ATTR_WIDTH,
    DOWNLOAD_LAZY,
    ELEMENT_ALL_PERMISSIONS,
    ELEMENT_APPLET_DESC,
    ELEMENT_APPLICATION_DESC,
    ELEMENT_ARGUMENT,
    ELEMENT_COMPONENT_DESC,
    ELEMENT_DESCRIPTION,
    ELEMENT_EXT_DOWNLOAD,
    ELEMENT_EXTENSION,
    ELEMENT_HOMEPAGE,
    ELEMENT_ICON,
    ELEMENT_INFORMATION,
    ELEMENT_INSTALLER_DESC,
    ELEMENT_J2EE_PERMISSIONS,
    ELEMENT_J2SE,
    ELEMENT_JAR,
    ELEMENT_JNLP,
    ELEMENT_NATIVE_LIB,
    ELEMENT_OFFLINE_ALLOWED,
    ELEMENT_PACKAGE,
    ELEMENT_PARAM,
    ELEMENT_PROPERTY,
    ELEMENT_RESOURCES,
    ELEMENT_SECURITY,
    ELEMENT_TITLE,
    ELEMENT_VENDOR,
)
from jnlpgen.writer.xml_writer import DEFAULT_INDENT, XmlWriter

logger = logging.getLogger(__name__)

Attributes = Dict[str, str]
Destination = Union[Path, str, BinaryIO]


def write_jnlp(
    bundle: JnlpBundle,
    output: Optional[Destination] = None,
    *,
    indent: Optional[str] = DEFAULT_INDENT,
) -> Optional[Path]:
    """Write ``bundle`` as a JNLP document.

    ``output`` defaults to ``bundle.output``. Paths are opened (and always
    closed) here; open binary streams are written to and left open. Returns
    the path written to, or ``None`` for streams.
    """

    destination = output if output is not None else bundle.output
    _check_bundle(bundle, destination)

    if hasattr(destination, "write"):
        _write_stream(bundle, destination, indent)
        return None

    path = Path(destination)
    with open_output(path) as stream:
        _write_stream(bundle, stream, indent)

    logger.info("Wrote %s", path)
    return path


def render_jnlp(
    bundle: JnlpBundle,
    *,
    indent: Optional[str] = DEFAULT_INDENT,
) -> bytes:
    """Return the JNLP document for ``bundle`` without touching the disk."""

    buffer = io.BytesIO()
    write_jnlp(bundle, buffer, indent=indent)
    return buffer.getvalue()


def _check_bundle(bundle: JnlpBundle, destination: Optional[Destination]) -> None:
    if not bundle.informations:
        raise BuildError(f"{ELEMENT_INFORMATION} element not found.")
    if destination is None:
        raise BuildError("Unspecified output file.")
    if bundle.descriptor is None:
        raise BuildError("Unspecified bundle type.")


def _write_stream(
    bundle: JnlpBundle,
    stream: BinaryIO,
    indent: Optional[str],
) -> None:
    logger.debug("Writing %s bundle", bundle.kind)

    try:
        _write_document(XmlWriter(stream, indent=indent), bundle)
    except (OSError, SAXException) as exc:
        raise BuildError(f"Failed to write JNLP document: {exc}") from exc


def _write_document(out: XmlWriter, bundle: JnlpBundle) -> None:
    out.start_document()
    out.start_element(ELEMENT_JNLP, _root_attributes(bundle))

    for information in bundle.informations:
        _write_information(out, information)

    if bundle.all_permissions or bundle.j2ee_permissions:
        out.start_element(ELEMENT_SECURITY)
        if bundle.all_permissions:
            out.add_element(ELEMENT_ALL_PERMISSIONS)
        if bundle.j2ee_permissions:
            out.add_element(ELEMENT_J2EE_PERMISSIONS)
        out.end_element(ELEMENT_SECURITY)

    for resources in bundle.resources:
        _write_resources(out, resources)

    descriptor = bundle.descriptor
    if isinstance(descriptor, ApplicationDesc):
        _write_application_desc(out, descriptor)
    elif isinstance(descriptor, AppletDesc):
        _write_applet_desc(out, descriptor)
    elif isinstance(descriptor, InstallerDesc):
        _write_installer_desc(out, descriptor)
    else:
        out.add_element(ELEMENT_COMPONENT_DESC)

    out.end_element(ELEMENT_JNLP)
    out.end_document()


def _put_text(attr: Attributes, name: str, value: Optional[str]) -> None:
    if value is not None:
        attr[name] = value


def _put_number(attr: Attributes, name: str, value: Optional[int]) -> None:
    if value:
        attr[name] = str(value)


def _put_flag(attr: Attributes, name: str, value: bool) -> None:
    if value:
        attr[name] = "true"


def _put_download(attr: Attributes, download: str) -> None:
    if download == DOWNLOAD_LAZY:
        attr[ATTR_DOWNLOAD] = DOWNLOAD_LAZY


def _require(value, element: str, attribute: str) -> None:
    if value is None:
        raise MissingAttributeError(element, attribute)


def _root_attributes(bundle: JnlpBundle) -> Attributes:
    attr: Attributes = {ATTR_SPEC: bundle.spec}
    _put_text(attr, ATTR_VERSION, bundle.version)
    _put_text(attr, ATTR_CODEBASE, bundle.codebase)
    _put_text(attr, ATTR_HREF, bundle.href)
    return attr


def _write_text_element(out: XmlWriter, name: str, text: str, attr=None) -> None:
    out.start_element(name, attr)
    out.characters(text)
    out.end_element(name)


def _write_description(out: XmlWriter, description: Description) -> None:
    attr: Attributes = {}
    _put_text(attr, ATTR_KIND, description.kind)
    _write_text_element(out, ELEMENT_DESCRIPTION, description.text, attr)


def _write_icon(out: XmlWriter, icon: Icon) -> None:
    _require(icon.href, ELEMENT_ICON, ATTR_HREF)

    attr: Attributes = {}
    _put_text(attr, ATTR_KIND, icon.kind)
    _put_number(attr, ATTR_WIDTH, icon.width)
    _put_number(attr, ATTR_HEIGHT, icon.height)
    _put_number(attr, ATTR_DEPTH, icon.depth)
    _put_number(attr, ATTR_SIZE, icon.size)
    _put_text(attr, ATTR_VERSION, icon.version)
    attr[ATTR_HREF] = icon.href
    out.add_element(ELEMENT_ICON, attr)


def _write_information(out: XmlWriter, information: Information) -> None:
    attr: Attributes = {}
    _put_text(attr, ATTR_LOCALE, information.locale)
    out.start_element(ELEMENT_INFORMATION, attr)

    if information.title is not None:
        _write_text_element(out, ELEMENT_TITLE, information.title)
    if information.vendor is not None:
        _write_text_element(out, ELEMENT_VENDOR, information.vendor)
    if information.homepage is not None:
        out.add_element(ELEMENT_HOMEPAGE, {ATTR_HREF: information.homepage})

    for description in information.descriptions:
        _write_description(out, description)
    for icon in information.icons:
        _write_icon(out, icon)

    if information.offline:
        out.add_element(ELEMENT_OFFLINE_ALLOWED)

    out.end_element(ELEMENT_INFORMATION)


def _write_j2se(out: XmlWriter, j2se: J2se) -> None:
    _require(j2se.version, ELEMENT_J2SE, ATTR_VERSION)

    attr: Attributes = {ATTR_VERSION: j2se.version}
    _put_text(attr, ATTR_HREF, j2se.href)
    _put_number(attr, ATTR_INITIAL_HEAP, j2se.initial_heap)
    _put_number(attr, ATTR_MAX_HEAP, j2se.max_heap)

    if not j2se.resources:
        out.add_element(ELEMENT_J2SE, attr)
        return

    out.start_element(ELEMENT_J2SE, attr)
    for resources in j2se.resources:
        _write_resources(out, resources)
    out.end_element(ELEMENT_J2SE)


def _write_jar(out: XmlWriter, jar: Jar) -> None:
    _require(jar.href, ELEMENT_JAR, ATTR_HREF)

    attr: Attributes = {ATTR_HREF: jar.href}
    _put_text(attr, ATTR_VERSION, jar.version)
    _put_flag(attr, ATTR_MAIN, jar.main)
    _put_download(attr, jar.download)
    _put_number(attr, ATTR_SIZE, jar.size)
    _put_text(attr, ATTR_PART, jar.part)
    out.add_element(ELEMENT_JAR, attr)


def _write_native_lib(out: XmlWriter, native_lib: NativeLib) -> None:
    _require(native_lib.href, ELEMENT_NATIVE_LIB, ATTR_HREF)

    attr: Attributes = {ATTR_HREF: native_lib.href}
    _put_text(attr, ATTR_VERSION, native_lib.version)
    _put_download(attr, native_lib.download)
    _put_number(attr, ATTR_SIZE, native_lib.size)
    _put_text(attr, ATTR_PART, native_lib.part)
    out.add_element(ELEMENT_NATIVE_LIB, attr)


def _write_ext_download(out: XmlWriter, download: ExtDownload) -> None:
    _require(download.ext_part, ELEMENT_EXT_DOWNLOAD, ATTR_EXT_PART)

    attr: Attributes = {ATTR_EXT_PART: download.ext_part}
    _put_text(attr, ATTR_PART, download.part)
    _put_download(attr, download.download)
    out.add_element(ELEMENT_EXT_DOWNLOAD, attr)


def _write_extension(out: XmlWriter, extension: Extension) -> None:
    _require(extension.href, ELEMENT_EXTENSION, ATTR_HREF)

    attr: Attributes = {ATTR_HREF: extension.href}
    _put_text(attr, ATTR_VERSION, extension.version)

    if not extension.downloads:
        out.add_element(ELEMENT_EXTENSION, attr)
        return

    out.start_element(ELEMENT_EXTENSION, attr)
    for download in extension.downloads:
        _write_ext_download(out, download)
    out.end_element(ELEMENT_EXTENSION)


def _write_property(out: XmlWriter, prop: Property, element: str) -> None:
    _require(prop.name, element, ATTR_NAME)
    _require(prop.value, element, ATTR_VALUE)

    out.add_element(element, {ATTR_NAME: prop.name, ATTR_VALUE: prop.value})


def _write_package(out: XmlWriter, package: Package) -> None:
    _require(package.name, ELEMENT_PACKAGE, ATTR_NAME)
    _require(package.part, ELEMENT_PACKAGE, ATTR_PART)

    attr: Attributes = {ATTR_NAME: package.name, ATTR_PART: package.part}
    _put_flag(attr, ATTR_RECURSIVE, package.recursive)
    out.add_element(ELEMENT_PACKAGE, attr)


def _write_resources(out: XmlWriter, resources: Resources) -> None:
    attr: Attributes = {}
    _put_text(attr, ATTR_OS, resources.os)
    _put_text(attr, ATTR_ARCH, resources.arch)
    _put_text(attr, ATTR_LOCALE, resources.locale)
    out.start_element(ELEMENT_RESOURCES, attr)

    for j2se in resources.j2ses:
        _write_j2se(out, j2se)
    for jar in resources.jars:
        _write_jar(out, jar)
    for native_lib in resources.native_libs:
        _write_native_lib(out, native_lib)
    for extension in resources.extensions:
        _write_extension(out, extension)
    for prop in resources.properties:
        _write_property(out, prop, ELEMENT_PROPERTY)
    for package in resources.packages:
        _write_package(out, package)

    out.end_element(ELEMENT_RESOURCES)


def _write_application_desc(out: XmlWriter, desc: ApplicationDesc) -> None:
    attr: Attributes = {}
    _put_text(attr, ATTR_MAIN_CLASS, desc.main_class)

    if not desc.arguments:
        out.add_element(ELEMENT_APPLICATION_DESC, attr)
        return

    out.start_element(ELEMENT_APPLICATION_DESC, attr)
    for argument in desc.arguments:
        _write_text_element(out, ELEMENT_ARGUMENT, argument)
    out.end_element(ELEMENT_APPLICATION_DESC)


def _write_applet_desc(out: XmlWriter, desc: AppletDesc) -> None:
    _require(desc.main_class, ELEMENT_APPLET_DESC, ATTR_MAIN_CLASS)
    _require(desc.name, ELEMENT_APPLET_DESC, ATTR_NAME)
    # Zero dimensions are rejected like missing ones.
    _require(desc.width or None, ELEMENT_APPLET_DESC, ATTR_WIDTH)
    _require(desc.height or None, ELEMENT_APPLET_DESC, ATTR_HEIGHT)

    attr: Attributes = {
        ATTR_MAIN_CLASS: desc.main_class,
        ATTR_NAME: desc.name,
        ATTR_WIDTH: str(desc.width),
        ATTR_HEIGHT: str(desc.height),
    }
    _put_text(attr, ATTR_DOCUMENT_BASE, desc.documentbase)

    if not desc.params:
        out.add_element(ELEMENT_APPLET_DESC, attr)
        return

    out.start_element(ELEMENT_APPLET_DESC, attr)
    for param in desc.params:
        _write_property(out, param, ELEMENT_PARAM)
    out.end_element(ELEMENT_APPLET_DESC)


def _write_installer_desc(out: XmlWriter, desc: InstallerDesc) -> None:
    attr: Attributes = {}
    _put_text(attr, ATTR_MAIN_CLASS, desc.main_class)
    out.add_element(ELEMENT_INSTALLER_DESC, attr)
