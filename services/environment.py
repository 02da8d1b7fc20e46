from typing import Optional
from models.dashboard import EnvironmentSelection

ENVIRONMENTS = ("production", "sandbox", "live-test")
PARTNERS = ("palla.app", "test.partner")

DEFAULT_ENV = "production"
DEFAULT_PARTNER = "palla.app"

def validate_env(env: Optional[str]) -> bool:
    return bool(env) and env.lower() in ENVIRONMENTS

def validate_partner_id(partner_id: Optional[str]) -> bool:
    return bool(partner_id) and partner_id.lower() in PARTNERS

def resolve_environment(env: Optional[str] = None, partner_id: Optional[str] = None) -> EnvironmentSelection:
    """Unknown or missing values fall back to the defaults"""
    return EnvironmentSelection(
        env=env.lower() if validate_env(env) else DEFAULT_ENV,
        partner_id=partner_id.lower() if validate_partner_id(partner_id) else DEFAULT_PARTNER,
    )
