import pytest
from pydantic import ValidationError

from models.roles import RoleId, RoleMode
from services.role_requirements import (
    ROLE_CATALOG,
    ROLE_REQUIREMENTS,
    check_role_table,
    default_role_mode,
    get_requirements,
    get_role_info,
    list_roles,
)


def test_every_role_has_requirements():
    assert set(ROLE_REQUIREMENTS) == set(RoleId)
    assert set(ROLE_CATALOG) == set(RoleId)


@pytest.mark.parametrize("role", list(RoleId))
def test_requirement_terms_are_lowercase(role):
    req = get_requirements(role)
    assert req.mandatory_skills
    for term in (
        *req.mandatory_skills,
        *req.optional_skills,
        *req.project_indicators,
        *req.experience_keywords,
    ):
        assert term == term.lower()


def test_missing_role_fails_check():
    partial = {k: v for k, v in ROLE_REQUIREMENTS.items() if k is not RoleId.GAME_DEVELOPER}
    with pytest.raises(RuntimeError, match="missing roles: game-developer"):
        check_role_table(partial)


def test_unknown_role_fails_check():
    table = dict(ROLE_REQUIREMENTS)
    table["fullstack-developer"] = ROLE_REQUIREMENTS[RoleId.BACKEND_FULLSTACK]
    with pytest.raises(RuntimeError, match="unknown roles: fullstack-developer"):
        check_role_table(table)


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        ROLE_REQUIREMENTS[RoleId.DATA_ANALYST] = ROLE_REQUIREMENTS[RoleId.AI_ML_INTERN]


def test_requirement_records_are_frozen():
    req = get_requirements(RoleId.DATA_ANALYST)
    with pytest.raises(ValidationError):
        req.mandatory_skills = ("excel",)


def test_lookup_by_string():
    assert get_requirements("cloud-devops") is ROLE_REQUIREMENTS[RoleId.CLOUD_DEVOPS]
    assert get_role_info("cloud-devops").label == "Cloud / DevOps Intern"


def test_list_roles():
    assert len(list_roles()) == 17
    core = list_roles(RoleMode.CORE)
    assert [r.id for r in core] == [
        RoleId.FRONTEND_DEVELOPER,
        RoleId.BACKEND_FULLSTACK,
        RoleId.DATA_ANALYST,
        RoleId.AI_ML_INTERN,
        RoleId.CLOUD_DEVOPS,
    ]
    assert len(list_roles("extended")) == 12


def test_default_role_mode():
    assert default_role_mode(RoleId.DATA_ANALYST) is RoleMode.CORE
    assert default_role_mode(RoleId.NETWORK_ENGINEER) is RoleMode.EXTENDED
