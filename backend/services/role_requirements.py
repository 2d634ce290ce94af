"""Static role-requirements table and role catalogue.

Both tables are built once at import and never mutated. Every RoleId must
have exactly one entry in each; the check runs at import so a missing role
fails the process at startup instead of surfacing per request.
"""

import logging
from collections.abc import Mapping
from types import MappingProxyType

from models.roles import RoleId, RoleInfo, RoleMode, RoleRequirements

logger = logging.getLogger(__name__)

ROLE_REQUIREMENTS: Mapping[RoleId, RoleRequirements] = MappingProxyType({
    # ---------------------------------------------------------------------
    # Core roles (well-tuned)
    # ---------------------------------------------------------------------
    RoleId.FRONTEND_DEVELOPER: RoleRequirements(
        mandatory_skills=("html", "css", "javascript", "react", "responsive"),
        optional_skills=("typescript", "vue", "angular", "tailwind", "sass", "webpack", "git"),
        project_indicators=("website", "web app", "ui", "frontend", "landing page", "dashboard"),
        experience_keywords=("developed", "built", "designed", "implemented", "created"),
    ),
    RoleId.BACKEND_FULLSTACK: RoleRequirements(
        mandatory_skills=("api", "database", "server", "backend"),
        optional_skills=("node", "python", "java", "sql", "mongodb", "express", "django", "rest", "graphql"),
        project_indicators=("api", "server", "backend", "database", "microservice", "crud"),
        experience_keywords=("architected", "implemented", "deployed", "integrated", "scaled"),
    ),
    RoleId.DATA_ANALYST: RoleRequirements(
        mandatory_skills=("sql", "excel", "data", "analysis"),
        optional_skills=("python", "tableau", "power bi", "statistics", "visualization", "pandas", "r"),
        project_indicators=("analysis", "dashboard", "report", "visualization", "insights", "metrics"),
        experience_keywords=("analyzed", "visualized", "reported", "identified", "improved"),
    ),
    RoleId.AI_ML_INTERN: RoleRequirements(
        mandatory_skills=("python", "machine learning", "data"),
        optional_skills=("tensorflow", "pytorch", "sklearn", "deep learning", "nlp", "neural network", "pandas", "numpy"),
        project_indicators=("model", "prediction", "classification", "training", "dataset", "accuracy"),
        experience_keywords=("trained", "developed", "implemented", "achieved", "improved accuracy"),
    ),
    RoleId.CLOUD_DEVOPS: RoleRequirements(
        mandatory_skills=("cloud", "linux", "docker"),
        optional_skills=("aws", "azure", "gcp", "kubernetes", "ci/cd", "terraform", "jenkins", "ansible"),
        project_indicators=("deployment", "pipeline", "infrastructure", "automation", "container"),
        experience_keywords=("deployed", "automated", "configured", "managed", "optimized"),
    ),
    # ---------------------------------------------------------------------
    # Extended roles (basic requirement sets)
    # ---------------------------------------------------------------------
    RoleId.PRODUCT_MANAGER: RoleRequirements(
        mandatory_skills=("product", "roadmap", "stakeholder"),
        optional_skills=("agile", "scrum", "jira", "analytics", "user research", "a/b testing"),
        project_indicators=("launched", "product", "feature", "user", "growth", "metrics"),
        experience_keywords=("led", "managed", "launched", "defined", "prioritized"),
    ),
    RoleId.UI_UX_DESIGNER: RoleRequirements(
        mandatory_skills=("design", "user experience", "prototype"),
        optional_skills=("figma", "sketch", "adobe xd", "user research", "wireframe", "usability"),
        project_indicators=("design", "prototype", "wireframe", "user flow", "redesign"),
        experience_keywords=("designed", "created", "researched", "improved", "tested"),
    ),
    RoleId.CYBERSECURITY: RoleRequirements(
        mandatory_skills=("security", "vulnerability", "network"),
        optional_skills=("penetration testing", "firewall", "encryption", "compliance", "siem", "nist"),
        project_indicators=("audit", "security", "vulnerability", "penetration", "compliance"),
        experience_keywords=("secured", "audited", "identified", "remediated", "implemented"),
    ),
    RoleId.QA_ENGINEER: RoleRequirements(
        mandatory_skills=("testing", "quality", "automation"),
        optional_skills=("selenium", "jest", "cypress", "jira", "test cases", "regression"),
        project_indicators=("test", "automation", "bug", "quality", "coverage"),
        experience_keywords=("tested", "automated", "identified", "verified", "improved quality"),
    ),
    RoleId.MOBILE_DEVELOPER: RoleRequirements(
        mandatory_skills=("mobile", "app", "ios", "android"),
        optional_skills=("react native", "flutter", "swift", "kotlin", "java"),
        project_indicators=("app", "mobile", "ios", "android", "playstore", "appstore"),
        experience_keywords=("developed", "published", "built", "integrated", "optimized"),
    ),
    RoleId.DATABASE_ADMIN: RoleRequirements(
        mandatory_skills=("database", "sql", "performance"),
        optional_skills=("postgresql", "mysql", "mongodb", "oracle", "backup", "replication"),
        project_indicators=("database", "migration", "optimization", "backup", "schema"),
        experience_keywords=("managed", "optimized", "migrated", "designed", "maintained"),
    ),
    RoleId.TECHNICAL_WRITER: RoleRequirements(
        mandatory_skills=("documentation", "technical writing", "api"),
        optional_skills=("markdown", "confluence", "git", "swagger", "user guide"),
        project_indicators=("documentation", "guide", "api docs", "readme", "tutorial"),
        experience_keywords=("documented", "wrote", "created", "maintained", "reviewed"),
    ),
    RoleId.SYSTEMS_ANALYST: RoleRequirements(
        mandatory_skills=("requirements", "analysis", "system design"),
        optional_skills=("uml", "sql", "business analysis", "workflow", "stakeholder"),
        project_indicators=("requirements", "analysis", "system", "workflow", "specification"),
        experience_keywords=("analyzed", "designed", "gathered", "defined", "documented"),
    ),
    RoleId.NETWORK_ENGINEER: RoleRequirements(
        mandatory_skills=("network", "tcp/ip", "routing"),
        optional_skills=("cisco", "firewall", "vpn", "dns", "load balancer", "monitoring"),
        project_indicators=("network", "infrastructure", "migration", "monitoring", "security"),
        experience_keywords=("configured", "maintained", "troubleshot", "designed", "implemented"),
    ),
    RoleId.BLOCKCHAIN_DEVELOPER: RoleRequirements(
        mandatory_skills=("blockchain", "smart contract", "web3"),
        optional_skills=("solidity", "ethereum", "defi", "nft", "cryptography"),
        project_indicators=("smart contract", "dapp", "token", "blockchain", "defi"),
        experience_keywords=("developed", "deployed", "audited", "integrated", "built"),
    ),
    RoleId.GAME_DEVELOPER: RoleRequirements(
        mandatory_skills=("game", "development", "programming"),
        optional_skills=("unity", "unreal", "c++", "c#", "game design", "3d"),
        project_indicators=("game", "gameplay", "engine", "multiplayer", "mobile game"),
        experience_keywords=("developed", "designed", "implemented", "optimized", "published"),
    ),
    RoleId.EMBEDDED_SYSTEMS: RoleRequirements(
        mandatory_skills=("embedded", "microcontroller", "firmware"),
        optional_skills=("c", "c++", "rtos", "iot", "arduino", "raspberry pi"),
        project_indicators=("firmware", "embedded", "iot", "sensor", "microcontroller"),
        experience_keywords=("developed", "programmed", "debugged", "optimized", "integrated"),
    ),
})


def _role(role_id: RoleId, label: str, description: str, is_core: bool) -> RoleInfo:
    return RoleInfo(id=role_id, label=label, description=description, is_core=is_core)


ROLE_CATALOG: Mapping[RoleId, RoleInfo] = MappingProxyType({
    info.id: info
    for info in (
        _role(RoleId.FRONTEND_DEVELOPER, "Web Developer / Frontend",
              "HTML, CSS, JavaScript, React, responsive design", True),
        _role(RoleId.BACKEND_FULLSTACK, "Backend / Full-Stack",
              "APIs, databases, server-side logic, Node.js, Python", True),
        _role(RoleId.DATA_ANALYST, "Data Analyst",
              "SQL, Excel, Python, data visualization, statistics", True),
        _role(RoleId.AI_ML_INTERN, "AI / ML Intern",
              "Machine learning, Python, TensorFlow, data science", True),
        _role(RoleId.CLOUD_DEVOPS, "Cloud / DevOps Intern",
              "AWS, Docker, CI/CD, Linux, infrastructure", True),
        _role(RoleId.PRODUCT_MANAGER, "Product Manager",
              "Strategy, roadmaps, stakeholder management", False),
        _role(RoleId.UI_UX_DESIGNER, "UI/UX Designer",
              "Figma, user research, prototyping, wireframes", False),
        _role(RoleId.CYBERSECURITY, "Cybersecurity Analyst",
              "Security audits, penetration testing, compliance", False),
        _role(RoleId.QA_ENGINEER, "QA Engineer",
              "Testing frameworks, automation, bug tracking", False),
        _role(RoleId.MOBILE_DEVELOPER, "Mobile Developer",
              "iOS, Android, React Native, Flutter", False),
        _role(RoleId.DATABASE_ADMIN, "Database Administrator",
              "SQL, PostgreSQL, MongoDB, performance tuning", False),
        _role(RoleId.TECHNICAL_WRITER, "Technical Writer",
              "Documentation, API docs, user guides", False),
        _role(RoleId.SYSTEMS_ANALYST, "Systems Analyst",
              "Requirements analysis, system design, workflows", False),
        _role(RoleId.NETWORK_ENGINEER, "Network Engineer",
              "Networking, TCP/IP, firewalls, VPN", False),
        _role(RoleId.BLOCKCHAIN_DEVELOPER, "Blockchain Developer",
              "Solidity, smart contracts, Web3", False),
        _role(RoleId.GAME_DEVELOPER, "Game Developer",
              "Unity, Unreal, C++, game design", False),
        _role(RoleId.EMBEDDED_SYSTEMS, "Embedded Systems Engineer",
              "C/C++, microcontrollers, IoT, firmware", False),
    )
})


def check_role_table(table: Mapping, name: str = "role table") -> None:
    """Raise RuntimeError unless ``table`` has exactly one entry per RoleId."""
    expected = set(RoleId)
    keys = set(table.keys())
    missing = sorted(r.value for r in expected - keys)
    unknown = sorted(str(k) for k in keys - expected)
    if missing or unknown:
        parts = []
        if missing:
            parts.append(f"missing roles: {', '.join(missing)}")
        if unknown:
            parts.append(f"unknown roles: {', '.join(unknown)}")
        raise RuntimeError(f"Invalid {name}: {'; '.join(parts)}")


check_role_table(ROLE_REQUIREMENTS, "role requirements table")
check_role_table(ROLE_CATALOG, "role catalog")
logger.debug("Loaded requirements for %d roles", len(ROLE_REQUIREMENTS))


def get_requirements(role: RoleId | str) -> RoleRequirements:
    """Requirements for ``role``. Accepts the enum or its string value."""
    return ROLE_REQUIREMENTS[RoleId(role)]


def get_role_info(role: RoleId | str) -> RoleInfo:
    return ROLE_CATALOG[RoleId(role)]


def is_core_role(role: RoleId | str) -> bool:
    return get_role_info(role).is_core


def default_role_mode(role: RoleId | str) -> RoleMode:
    """Core roles analyze in core mode, everything else in extended mode."""
    return RoleMode.CORE if is_core_role(role) else RoleMode.EXTENDED


def list_roles(mode: RoleMode | str | None = None) -> list[RoleInfo]:
    """Catalogue entries in declaration order, optionally filtered by mode."""
    roles = list(ROLE_CATALOG.values())
    if mode is None:
        return roles
    want_core = RoleMode(mode) is RoleMode.CORE
    return [r for r in roles if r.is_core == want_core]
