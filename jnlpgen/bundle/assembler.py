import logging
from pathlib import Path
from typing import List, Optional

from pydantic import Field, PrivateAttr

from jnlpgen.errors import ConfigError
from jnlpgen.model.base import JnlpModel
from jnlpgen.model.descriptors import (
    AppletDesc,
    ApplicationDesc,
    BundleKind,
    ComponentDesc,
    Descriptor,
    InstallerDesc,
)
from jnlpgen.model.information import Information
from jnlpgen.model.resources import Resources

logger = logging.getLogger(__name__)

DEFAULT_SPEC = "1.0+"


class JnlpBundle(JnlpModel):
    """Collects everything that goes into one JNLP file.

    Children are created through the ``add_*`` methods, which register the
    new element and hand it back for further configuration. A bundle
    describes exactly one kind of package: once a component, application,
    applet or installer descriptor has been selected, selecting another
    one raises :class:`ConfigError` and leaves the first in place.
    """

    spec: str = Field(
        default=DEFAULT_SPEC,
        description="Version of the JNLP specification the file targets",
    )
    version: Optional[str] = Field(
        default=None,
        description="Version of the bundle described by the file",
    )
    codebase: Optional[str] = Field(
        default=None,
        description="Base URL for all relative URLs in the file",
    )
    href: Optional[str] = Field(
        default=None,
        description="URL of the JNLP file itself",
    )
    output: Optional[Path] = Field(
        default=None,
        description="Where the JNLP file is written",
    )

    informations: List[Information] = Field(default_factory=list)
    resources: List[Resources] = Field(default_factory=list)

    all_permissions: bool = Field(
        default=False,
        description="Request full access to the local machine",
    )
    j2ee_permissions: bool = Field(
        default=False,
        description="Request the J2EE application client permission set",
    )

    _descriptor: Optional[Descriptor] = PrivateAttr(default=None)

    @property
    def descriptor(self) -> Optional[Descriptor]:
        return self._descriptor

    @property
    def kind(self) -> Optional[BundleKind]:
        if self._descriptor is None:
            return None
        return self._descriptor.kind

    def add_information(self, **fields) -> Information:
        information = Information(**fields)
        self.informations.append(information)
        return information

    def add_resources(self, **fields) -> Resources:
        resources = Resources(**fields)
        self.resources.append(resources)
        return resources

    def set_component(self, component: bool) -> None:
        if component and self.kind != "component":
            self._set_descriptor(ComponentDesc())

    def add_application_desc(self, **fields) -> ApplicationDesc:
        return self._set_descriptor(ApplicationDesc(**fields))

    def add_applet_desc(self, **fields) -> AppletDesc:
        return self._set_descriptor(AppletDesc(**fields))

    def add_installer_desc(self, **fields) -> InstallerDesc:
        return self._set_descriptor(InstallerDesc(**fields))

    def _set_descriptor(self, descriptor):
        if self._descriptor is not None:
            raise ConfigError("Cannot describe multiple packages")

        logger.debug("Bundle kind set to %s", descriptor.kind)
        self._descriptor = descriptor
        return descriptor

    class Config:
        validate_assignment = True
        extra = "forbid"
