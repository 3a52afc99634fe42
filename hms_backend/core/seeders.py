from django.contrib.auth import get_user_model
from django.db import transaction

from .models import AuditLog, Role

User = get_user_model()

SEED_EMAIL_DOMAIN = "@seed.local"
SEED_PASSWORD = "ChangeMe123!"

def seed_core(flush: bool = False) -> dict:
    """
    Seeds:
    - the four standard roles
    - one demo user per role (``<role>@seed.local``)

    With flush=True, audit entries and seed users are removed first;
    superusers and other accounts are left alone.
    """
    stats: dict[str, int] = {}

    with transaction.atomic():
        if flush:
            AuditLog.objects.all().delete()
            User.objects.filter(is_superuser=False, email__endswith=SEED_EMAIL_DOMAIN).delete()

        roles = _seed_roles()
        stats["core_roles"] = len(roles)
        stats["core_users"] = len(_seed_users(roles))

    return stats


def _seed_roles() -> list[Role]:
    roles: list[Role] = []
    for name, label in Role.CHOICES:
        role, _created = Role.objects.get_or_create(name=name, defaults={"label": label})
        roles.append(role)
    return roles


def _seed_users(roles: list[Role]) -> list:
    users = []
    for role in roles:
        email = f"{role.name}{SEED_EMAIL_DOMAIN}"
        user = User.objects.filter(email=email).first()
        if user is None:
            user = User.objects.create_user(
                username=f"{role.name}_demo",
                email=email,
                password=SEED_PASSWORD,
                first_name=role.label,
                last_name="Demo",
                role=role,
                is_staff=role.name == Role.ADMIN,
            )
        users.append(user)
    return users
