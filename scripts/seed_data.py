"""Seed the database with a demo account and sample projects."""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from datetime import datetime, timedelta, timezone
from cpms.database import SessionLocal, engine, Base
import cpms.models  # noqa: F401

from cpms.models.user import User
from cpms.models.construction import Construction
from cpms.utils.passwords import generate_salt, hash_password

DEMO_EMAIL = "admin@cpms.local"
DEMO_PASSWORD = "changeme"


def seed():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        if db.query(User).count() > 0:
            print("Database already seeded. Skipping.")
            return

        salt = generate_salt()
        admin = User(email=DEMO_EMAIL, salt=salt, password=hash_password(DEMO_PASSWORD, salt))
        db.add(admin)
        db.flush()

        now = datetime.now(timezone.utc)
        samples = [
            ("Northside Primary School", "12 Park Road, Springfield", 1, "Education",
             "New two-storey classroom block with library.", now + timedelta(days=90)),
            ("Riverside Clinic Extension", "48 River Street, Springfield", 2, "Health",
             "Outpatient wing and car park.", now + timedelta(days=45)),
            ("Harbour Office Tower", "1 Harbour Plaza, Springfield", 3, "Office",
             "Twelve-floor office tower fit-out.", now + timedelta(days=14)),
            ("Community Hall Refurbishment", "5 Main Street, Springfield", 4, "Other",
             "Roof replacement and accessibility upgrades.", now - timedelta(days=30)),
        ]
        for name, location, stage, category, details, start_date in samples:
            construction = Construction(
                name=name,
                location=location,
                stage=stage,
                category=category,
                details=details,
                creator_id=admin.id,
            )
            construction.set_start_date_from_local(start_date)
            db.add(construction)

        db.commit()
        print(f"Seeded user {DEMO_EMAIL} and {len(samples)} construction projects.")
    finally:
        db.close()


if __name__ == "__main__":
    seed()
