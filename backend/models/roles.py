"""Role identifiers and the static per-role requirement records."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class RoleId(str, Enum):
    # Core roles
    FRONTEND_DEVELOPER = "frontend-developer"
    BACKEND_FULLSTACK = "backend-fullstack"
    DATA_ANALYST = "data-analyst"
    AI_ML_INTERN = "ai-ml-intern"
    CLOUD_DEVOPS = "cloud-devops"
    # Extended roles
    PRODUCT_MANAGER = "product-manager"
    UI_UX_DESIGNER = "ui-ux-designer"
    CYBERSECURITY = "cybersecurity"
    QA_ENGINEER = "qa-engineer"
    MOBILE_DEVELOPER = "mobile-developer"
    DATABASE_ADMIN = "database-admin"
    TECHNICAL_WRITER = "technical-writer"
    SYSTEMS_ANALYST = "systems-analyst"
    NETWORK_ENGINEER = "network-engineer"
    BLOCKCHAIN_DEVELOPER = "blockchain-developer"
    GAME_DEVELOPER = "game-developer"
    EMBEDDED_SYSTEMS = "embedded-systems"


class RoleMode(str, Enum):
    CORE = "core"
    EXTENDED = "extended"


class RoleRequirements(BaseModel):
    """Terms the scorer looks for when analyzing a resume for one role.

    All terms are lower-case; matching runs against lower-cased resume text.
    """
    model_config = ConfigDict(frozen=True)

    mandatory_skills: tuple[str, ...]
    optional_skills: tuple[str, ...] = ()
    project_indicators: tuple[str, ...] = ()
    experience_keywords: tuple[str, ...] = ()


class RoleInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: RoleId
    label: str
    description: str
    is_core: bool
