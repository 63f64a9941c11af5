class StickySidebarError(ValueError):
    """Setup-time configuration fault of a sticky sidebar."""


class SidebarNotFoundError(StickySidebarError):
    pass


class ContainerNotFoundError(StickySidebarError):
    pass


class OptionsError(StickySidebarError):
    pass
