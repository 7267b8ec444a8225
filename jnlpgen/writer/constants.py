ELEMENT_JNLP = "jnlp"
ELEMENT_INFORMATION = "information"
ELEMENT_TITLE = "title"
ELEMENT_VENDOR = "vendor"
ELEMENT_HOMEPAGE = "homepage"
ELEMENT_DESCRIPTION = "description"
ELEMENT_ICON = "icon"
ELEMENT_OFFLINE_ALLOWED = "offline-allowed"
ELEMENT_SECURITY = "security"
ELEMENT_ALL_PERMISSIONS = "all-permissions"
ELEMENT_J2EE_PERMISSIONS = "j2ee-application-client-permissions"
ELEMENT_RESOURCES = "resources"
ELEMENT_J2SE = "j2se"
ELEMENT_JAR = "jar"
ELEMENT_NATIVE_LIB = "nativelib"
ELEMENT_EXTENSION = "extension"
ELEMENT_EXT_DOWNLOAD = "ext-download"
ELEMENT_PROPERTY = "property"
ELEMENT_PACKAGE = "package"
ELEMENT_APPLICATION_DESC = "application-desc"
ELEMENT_ARGUMENT = "argument"
ELEMENT_APPLET_DESC = "applet-desc"
ELEMENT_PARAM = "param"
ELEMENT_COMPONENT_DESC = "component-desc"
ELEMENT_INSTALLER_DESC = "installer-desc"

ATTR_SPEC = "spec"
ATTR_VERSION = "version"
ATTR_CODEBASE = "codebase"
ATTR_HREF = "href"
ATTR_LOCALE = "locale"
ATTR_KIND = "kind"
ATTR_WIDTH = "width"
ATTR_HEIGHT = "height"
ATTR_SIZE = "size"
ATTR_DEPTH = "depth"
ATTR_OS = "os"
ATTR_ARCH = "arch"
ATTR_INITIAL_HEAP = "initial-heap-size"
ATTR_MAX_HEAP = "max-heap-size"
ATTR_MAIN = "main"
ATTR_DOWNLOAD = "download"
ATTR_PART = "part"
ATTR_EXT_PART = "ext-part"
ATTR_NAME = "name"
ATTR_VALUE = "value"
ATTR_RECURSIVE = "recursive"
ATTR_MAIN_CLASS = "main-class"
ATTR_DOCUMENT_BASE = "documentbase"

DOWNLOAD_LAZY = "lazy"
