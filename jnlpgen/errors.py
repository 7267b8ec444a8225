class JnlpError(Exception):
    exit_code: int = 1

    def __init__(self, message: str):
        super().__init__(message)


class ConfigError(JnlpError):
    exit_code = 2


class BuildError(JnlpError):
    exit_code = 20


class MissingAttributeError(BuildError):
    exit_code = 21

    def __init__(self, element: str, attribute: str):
        self.element = element
        self.attribute = attribute
        super().__init__(
            f"Missing {attribute} attribute for {element} element."
        )
