#!/usr/bin/env python3
"""
CLI for the HR Dashboard API

Commands:
    init-db      - Create tables (non-production only)
    seed-demo    - Insert demo profiles, jobs and applications
    issue-token  - Print a session token for a user id
    chart        - Print chart data for a user, through the same pipeline as the API

Usage:
    python cli.py init-db
    python cli.py seed-demo --months 14
    python cli.py issue-token hr-demo
    python cli.py chart hr-demo --type by-job
"""

import json
import random
import sys
from datetime import datetime, timedelta

import click


def get_app_context():
    """Get Flask app context for database access."""
    from app import create_app
    app = create_app()
    return app.app_context()


@click.group()
@click.version_option(version="1.0.0", prog_name="hr-dashboard-cli")
def cli():
    """HR Dashboard CLI - seed data, issue tokens, inspect charts."""
    pass


@cli.command("init-db")
def init_db():
    """Create all tables."""
    from models.database import db

    with get_app_context():
        db.create_all()
    click.echo("Tables created")


@cli.command("seed-demo")
@click.option("--months", default=14, show_default=True, help="Months of application history")
@click.option("--jobs", "job_count", default=12, show_default=True, help="Jobs owned by the demo HR user")
@click.option("--seed", default=42, show_default=True, help="Random seed")
def seed_demo(months, job_count, seed):
    """
    Insert demo data: an HR user (hr-demo), an ADMIN (admin-demo) and an
    applicant (applicant-demo), jobs owned by HR and by another HR user,
    and applications spread over the last MONTHS months.
    """
    from models import db, Profile, Job, Application

    rng = random.Random(seed)
    now = datetime.utcnow()

    with get_app_context():
        for user_id, role in (
            ("hr-demo", "HR"),
            ("hr-other", "HR"),
            ("admin-demo", "ADMIN"),
            ("applicant-demo", "APPLICANT"),
        ):
            if db.session.get(Profile, user_id) is None:
                db.session.add(Profile(id=user_id, role=role, full_name=user_id))

        jobs = []
        for i in range(job_count):
            owner = "hr-demo" if i % 3 else "hr-other"
            job = Job(title=f"Demo Position {i + 1}", created_by=owner)
            db.session.add(job)
            jobs.append(job)
        db.session.flush()

        total = 0
        for job in jobs:
            for _ in range(rng.randint(1, 20)):
                created_at = now - timedelta(days=rng.randint(0, months * 30))
                db.session.add(Application(job_id=job.id, created_at=created_at))
                total += 1

        db.session.commit()

    click.echo(f"Seeded {len(jobs)} jobs and {total} applications")


@cli.command("issue-token")
@click.argument("user_id")
@click.option("--hours", default=None, type=int, help="Token lifetime (default: JWT_EXPIRATION_HOURS)")
def issue_token(user_id, hours):
    """Print a session token for USER_ID."""
    from routes.auth import generate_token

    with get_app_context():
        click.echo(generate_token(user_id, expires_in_hours=hours))


@cli.command("chart")
@click.argument("user_id")
@click.option("--type", "chart_type", type=click.Choice(["monthly", "by-job"]), default="monthly")
def chart(user_id, chart_type):
    """Print chart data for USER_ID as the API would return it."""
    from services.hr_charts.errors import ChartsError
    from services.hr_charts.service import get_chart_data
    from services.hr_charts.store import RecruitingStore

    with get_app_context():
        try:
            data = get_chart_data(RecruitingStore(), user_id, {"type": chart_type})
        except ChartsError as e:
            click.echo(json.dumps(e.to_dict(), indent=2))
            sys.exit(1)

    click.echo(json.dumps({"success": True, "data": data}, indent=2))


if __name__ == "__main__":
    cli()
