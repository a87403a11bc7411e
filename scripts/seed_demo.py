"""Create demo users and a published post so the edit screen has something to show."""
import asyncio

from euclid_mam.database import init_db, session_scope
from euclid_mam.kernel.content import ContentService
from euclid_mam.kernel.identity import IdentityService
from euclid_mam.kernel.models import PostStatus, UserRole

DEMO_PASSWORD = "Demo1234!"

DEMO_USERS = [
    ("admin", "admin@example.com", UserRole.ADMINISTRATOR, "Ada", "Admin"),
    ("eddie", "eddie@example.com", UserRole.EDITOR, "Eddie", "Editor"),
    ("alice", "alice@example.com", UserRole.AUTHOR, "Alice", "Author"),
    ("carl", "carl@example.com", UserRole.CONTRIBUTOR, "", ""),
    ("sam", "sam@example.com", UserRole.SUBSCRIBER, "Sam", "Reader"),
]


async def main() -> None:
    await init_db()
    async with session_scope() as session:
        identity = IdentityService(session)
        users = {}
        for login, email, role, first, last in DEMO_USERS:
            user = await identity.get_user_by_login(login)
            if user is None:
                user = await identity.register_user(
                    login=login,
                    email=email,
                    password=DEMO_PASSWORD,
                    roles=[role],
                    first_name=first,
                    last_name=last,
                    display_name=f"{first} {last}".strip() or login,
                )
            users[login] = user
            print(f"{role.value:<14} {login:<8} id={user.id}")

        post = await ContentService(session).create_post(
            author_id=users["alice"].id,
            title="Hello contributors",
            body="<p>A post written by several people.</p>",
            status=PostStatus.PUBLISH.value,
            slug="hello-contributors",
        )
        print(f"\nPost {post.id}: /admin/posts/{post.id}/edit  /posts/{post.id}")
        print(f"Password for every demo user: {DEMO_PASSWORD}")


if __name__ == "__main__":
    asyncio.run(main())
