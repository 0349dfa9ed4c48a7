#!/usr/bin/env python3
"""
Demo data loader for the ProSocial relational store.

Fills an empty database with five members, their connections, posts,
comments and likes. Does nothing when any user already exists, so it
is safe to run after every deploy.

Usage:
    python run_seed.py              # Seed if the users table is empty
    python run_seed.py --dry-run    # Show what would be inserted

Run run_migrations.py first; the connection settings are the same.
"""

import argparse
from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
from rich.console import Console
from rich.table import Table

from run_migrations import connect
from shared.config import get_settings

console = Console()

DEMO_PASSWORD = "Password123"

_MEMBERS = [
    ("11111111-1111-1111-1111-111111111111", "alice.dupont@email.com", "Alice", "Dupont",
     "Full Stack Developer | React & .NET",
     "Web developer with ten years in IT, always trying the newest tools."),
    ("22222222-2222-2222-2222-222222222222", "bob.martin@email.com", "Bob", "Martin",
     "Digital Project Manager",
     "Agile delivery lead and certified Scrum Master."),
    ("33333333-3333-3333-3333-333333333333", "claire.bernard@email.com", "Claire", "Bernard",
     "UX/UI Designer | Figma Expert",
     "I design experiences people remember. Design thinking enthusiast."),
    ("44444444-4444-4444-4444-444444444444", "david.petit@email.com", "David", "Petit",
     "DevOps Engineer | AWS & Kubernetes",
     "Automation, CI/CD and infrastructure as code. Cloud native advocate."),
    ("55555555-5555-5555-5555-555555555555", "emma.leroy@email.com", "Emma", "Leroy",
     "Data Scientist | Python & Machine Learning",
     "Turning data into insight. PhD in artificial intelligence."),
]

# (requester index, addressee index, status)
_CONNECTIONS = [
    (0, 1, "accepted"),
    (0, 2, "accepted"),
    (1, 3, "accepted"),
    (2, 4, "accepted"),
    (3, 0, "pending"),
    (4, 1, "accepted"),
]

# (post id, author index, age, content)
_POSTS = [
    ("aaaa1111-1111-1111-1111-111111111111", 0, timedelta(days=5),
     "Just finished an advanced .NET 8 course. The performance work in this release is impressive. "
     "Who else has tried the new features?"),
    ("aaaa2222-2222-2222-2222-222222222222", 0, timedelta(days=2),
     "Tip of the day: use records for your DTOs. Immutability plus less code means fewer bugs!"),
    ("bbbb1111-1111-1111-1111-111111111111", 1, timedelta(days=4),
     "Our team just closed a record sprint: 47 story points delivered. The key was clear communication "
     "and daily stand-ups that never run past 15 minutes."),
    ("cccc1111-1111-1111-1111-111111111111", 2, timedelta(days=3),
     "New project underway: a full UX overhaul of a banking app. The challenge is simplifying complex "
     "workflows while staying within regulatory limits."),
    ("dddd1111-1111-1111-1111-111111111111", 3, timedelta(days=1),
     "Kubernetes migration complete! 200 microservices and zero downtime. Happy to answer K8s questions."),
    ("eeee1111-1111-1111-1111-111111111111", 4, timedelta(hours=12),
     "Our new fraud detection model reaches 94% precision. The secret: feature engineering, XGBoost "
     "and a lot of coffee ☕"),
]

# (post index, author index, delay after the post, content)
_COMMENTS = [
    (0, 1, timedelta(hours=2), "Congratulations Alice! Looking forward to your .NET 8 projects."),
    (0, 2, timedelta(hours=4), "Great! Could you share what you learned?"),
    (2, 0, timedelta(hours=3), "Well done to the whole team! 47 points is impressive 💪"),
    (4, 1, timedelta(hours=2), "200 microservices! Which service mesh do you use?"),
    (4, 3, timedelta(hours=3), "@Bob We use Istio, it works well for our use case."),
    (5, 0, timedelta(hours=2), "94% is excellent! Have you tried transformers too?"),
]

# (post index, user index)
_LIKES = [
    (0, 1), (0, 2), (0, 3),
    (1, 1), (1, 4),
    (2, 0), (2, 3),
    (3, 0), (3, 4),
    (4, 0), (4, 1), (4, 4),
    (5, 0), (5, 1), (5, 2), (5, 3),
]


def build_seed(now: datetime, password_hash: str) -> dict[str, list[dict]]:
    """
    Rows to insert, keyed by table, in foreign-key order.

    All members share one password hash.
    """
    users = [
        {
            "id": user_id,
            "email": email,
            "password_hash": password_hash,
            "first_name": first_name,
            "last_name": last_name,
            "headline": headline,
            "bio": bio,
            "avatar_url": f"https://i.pravatar.cc/150?u={first_name.lower()}",
            "created_at": now,
            "updated_at": now,
        }
        for user_id, email, first_name, last_name, headline, bio in _MEMBERS
    ]
    ids = [user["id"] for user in users]

    posts = [
        {
            "id": post_id,
            "author_id": ids[author],
            "content": content,
            "created_at": now - age,
            "updated_at": now - age,
        }
        for post_id, author, age, content in _POSTS
    ]

    comments = []
    for post, author, delay, content in _COMMENTS:
        created_at = posts[post]["created_at"] + delay
        comments.append({
            "post_id": posts[post]["id"],
            "author_id": ids[author],
            "content": content,
            "created_at": created_at,
            "updated_at": created_at,
        })

    return {
        "users": users,
        "connections": [
            {"requester_id": ids[a], "addressee_id": ids[b], "status": status}
            for a, b, status in _CONNECTIONS
        ],
        "posts": posts,
        "comments": comments,
        "likes": [
            {"post_id": posts[post]["id"], "user_id": ids[user]}
            for post, user in _LIKES
        ],
    }


def has_users(conn) -> bool:
    with conn.cursor() as cur:
        cur.execute("SELECT EXISTS (SELECT 1 FROM users)")
        return bool(cur.fetchone()[0])


def insert_rows(cur, table: str, rows: list[dict]) -> None:
    columns = list(rows[0])
    statement = "INSERT INTO {} ({}) VALUES ({})".format(
        table,
        ", ".join(columns),
        ", ".join(["%s"] * len(columns)),
    )
    cur.executemany(statement, [tuple(row[c] for c in columns) for row in rows])


def seed(conn, data: dict[str, list[dict]]) -> bool:
    """
    Insert the demo rows in one transaction.

    Returns:
        False when the database already holds users and nothing was written.
    """
    if has_users(conn):
        console.print("[yellow]Database already has users, skipping seed.[/yellow]")
        return False

    try:
        with conn.cursor() as cur:
            for table, rows in data.items():
                insert_rows(cur, table, rows)
                console.print(f"[green]✓[/green] {len(rows)} {table}")
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    return True


def show_summary(data: dict[str, list[dict]]) -> None:
    table = Table(title="Seed Data")
    table.add_column("Table", style="cyan")
    table.add_column("Rows", justify="right")
    for name, rows in data.items():
        table.add_row(name, str(len(rows)))
    console.print(table)


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Load ProSocial demo data into an empty database")
    parser.add_argument("--dry-run", action="store_true", help="Show row counts without writing")
    args = parser.parse_args(argv)

    console.print("[bold]ProSocial Demo Seed[/bold]")

    if args.dry_run:
        show_summary(build_seed(datetime.now(timezone.utc), password_hash="<hash>"))
        return

    rounds = get_settings().bcrypt_rounds
    password_hash = bcrypt.hashpw(DEMO_PASSWORD.encode("utf-8"), bcrypt.gensalt(rounds=rounds)).decode("utf-8")
    data = build_seed(datetime.now(timezone.utc), password_hash)

    conn = connect()
    try:
        if seed(conn, data):
            console.print(f"\n[bold green]Seed complete.[/bold green] Demo accounts use password {DEMO_PASSWORD}:")
            for user in data["users"]:
                console.print(f"  - {user['email']}")
    finally:
        conn.close()


if __name__ == "__main__":
    main()
