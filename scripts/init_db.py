#!/usr/bin/env python3
"""
Standalone database initialization script.
Creates the schema, seeds a starter ingredient catalog and an admin account.

Usage:
    python scripts/init_db.py
    ADMIN_EMAIL=me@example.com ADMIN_PASSWORD=secret python scripts/init_db.py
"""

import logging
import os
import sys

# Ensure we're using the right Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from dotenv import load_dotenv
from sqlalchemy.engine import make_url

# ADMIN_* variables are read straight from the environment
load_dotenv()

from app.config import settings
from domain.models import SessionLocal, Ingredient, init_database
from repositories import IngredientRepository, UserRepository
from services.auth_service import AuthService

logger = logging.getLogger("mealtracker.scripts.init_db")

# Per-serving values
SEED_INGREDIENTS = [
    {
        "name": "Medium Pear",
        "description": "Fruit",
        "serving_size": 178.0,
        "calories": 101.0,
        "carbohydrates": 27.0,
        "fat": 0.2,
        "protein": 0.6,
    },
    {
        "name": "Bacon",
        "description": "Pork Bacon",
        "serving_size": 35.0,
        "calories": 161.0,
        "carbohydrates": 0.6,
        "fat": 12.0,
        "protein": 12.0,
    },
    {
        "name": "Large Egg",
        "description": "Whole egg, boiled",
        "serving_size": 50.0,
        "calories": 78.0,
        "carbohydrates": 0.6,
        "fat": 5.3,
        "protein": 6.3,
    },
    {
        "name": "Rolled Oats",
        "description": "Dry oats",
        "serving_size": 40.0,
        "calories": 150.0,
        "carbohydrates": 27.0,
        "fat": 3.0,
        "protein": 5.0,
    },
    {
        "name": "Whole Milk",
        "description": "One cup",
        "serving_size": 244.0,
        "calories": 149.0,
        "carbohydrates": 12.0,
        "fat": 8.0,
        "protein": 8.0,
    },
]


def seed_ingredients(db) -> int:
    repo = IngredientRepository(db)
    created = 0
    for data in SEED_INGREDIENTS:
        if repo.get_by_name(data["name"]):
            continue
        db.add(Ingredient(**data))
        created += 1
    db.commit()
    return created


def seed_admin(db) -> bool:
    email = os.getenv("ADMIN_EMAIL", "admin@example.com")
    password = os.getenv("ADMIN_PASSWORD")
    repo = UserRepository(db)
    if repo.get_by_email(email):
        return False
    if not password:
        logger.warning("ADMIN_PASSWORD not set; skipping admin account")
        return False
    repo.create_user(
        username="admin",
        email=email,
        password_digest=AuthService.hash_password(password),
        admin=True,
    )
    return True


def main() -> int:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()), format=settings.log_format
    )
    try:
        init_database()
        db = SessionLocal()
        try:
            created = seed_ingredients(db)
            admin_created = seed_admin(db)
        finally:
            db.close()
    except Exception:
        logger.exception("Database initialization failed")
        return 1

    logger.info(f"seed_complete ingredients_created={created} admin_created={admin_created}")
    return 0


if __name__ == "__main__":
    print("\n" + "=" * 60)
    print("MealTracker Database Initialization")
    print("=" * 60)
    target = make_url(settings.database_url).render_as_string(hide_password=True)
    print(f"\nTarget database: {target}\n")

    exit_code = main()

    if exit_code == 0:
        print("SUCCESS! Your database is ready to use.")
    else:
        print("FAILED! Check the errors above.")

    sys.exit(exit_code)
