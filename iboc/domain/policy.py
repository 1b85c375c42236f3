from iboc.domain.entities import AppUser
from iboc.rules.models import Rules


class PolicyEngine:
    def __init__(self, rules: Rules):
        self.rules = rules

    def check_permission(self, user: AppUser | None, action: str) -> bool:
        """
        Check if the user is allowed to perform the action.

        Order of precedence:
        1. Public Permissions (Global)
        2. Role-Based Access Control on the user's permission level
        """
        if action in self.rules.rbac.public_permissions:
            return True

        if not user:
            return False

        allowed_actions = self.rules.rbac.roles.get(user.permissions, [])
        if "*" in allowed_actions:
            return True
        if action in allowed_actions:
            return True

        # Scoped wildcards (e.g. "members:*" matches "members:edit")
        if ":" in action:
            scope = action.split(":")[0]
            if f"{scope}:*" in allowed_actions:
                return True

        return False

    def can_manage_credentials(self, user: AppUser) -> bool:
        return self.check_permission(user, "credentials:manage")
