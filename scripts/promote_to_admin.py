#!/usr/bin/env python3
"""
Promote a user account to admin.

Usage: python scripts/promote_to_admin.py someone@example.com
"""
import sys
sys.path.insert(0, '.')

from app.db.postgres import execute_raw_sql


def promote_user_to_admin(email: str) -> bool:
    rows = execute_raw_sql(
        """
        UPDATE users SET role = 'admin'
        WHERE email = :email
        RETURNING user_id, name, email, branch, role
        """,
        {"email": email.lower()}
    )
    if not rows:
        print(f"❌ User with email {email} not found")
        return False

    user = rows[0]
    print(f"✅ Successfully promoted {user['name']} ({user['email']}) to admin")
    print(f"- User ID: {user['user_id']}")
    print(f"- Branch: {user['branch']}")
    print(f"- Role: {user['role']}")
    return True


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print("Usage: python scripts/promote_to_admin.py <email>")
        sys.exit(1)
    sys.exit(0 if promote_user_to_admin(sys.argv[1]) else 1)
