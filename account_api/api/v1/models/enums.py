import enum


class Status(str, enum.Enum):
    """Lifecycle flag shared by users and roles. Soft delete sets INACTIVE."""
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"


class RoleType(str, enum.Enum):
    """Role names the application relies on."""
    ADMINISTRADOR = "ADMINISTRADOR"
    GENERAL = "GENERAL"
