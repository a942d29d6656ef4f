"""
Generate synthetic patients for the doctor's dashboard.
Run with: python -m scripts.generate_patients
Run with: python -m scripts.generate_patients --count 50 --reset  (wipe the table first)

Records go through the patient repository, so every seeded row passes the
same validation as a record created over the API.
"""

import argparse
import asyncio
import random
from datetime import date, datetime, timedelta, timezone
from sqlalchemy import delete, func, select
from patient_service.database import engine, async_session, Base
from patient_service.exceptions import PatientConflictError
from patient_service.models.patient import Patient
from patient_service.services.patient_repository import patient_repository

FIRST_NAMES_F = [
    "Emily", "Sarah", "Maria", "Jessica", "Jennifer", "Amanda", "Linda", "Patricia",
    "Elizabeth", "Susan", "Margaret", "Dorothy", "Lisa", "Nancy", "Karen", "Betty",
    "Mei", "Aisha", "Priya", "Fatima", "Yuki", "Rosa", "Olga", "Ingrid",
]

FIRST_NAMES_M = [
    "James", "Robert", "Michael", "William", "David", "Richard", "Joseph", "Thomas",
    "Charles", "Daniel", "Matthew", "Anthony", "Mark", "Donald", "Steven", "Paul",
    "Wei", "Mohammed", "Raj", "Carlos", "Hiroshi", "Ivan", "Ahmed", "Lars",
]

LAST_NAMES = [
    "Johnson", "Williams", "Brown", "Jones", "Garcia", "Miller", "Davis", "Rodriguez",
    "Martinez", "Hernandez", "Lopez", "Gonzalez", "Wilson", "Anderson", "Thomas", "Taylor",
    "Chen", "Kim", "Patel", "Nguyen", "Yamamoto", "Singh", "Ali", "Johansson",
]

STREETS = [
    "Main St", "Oak Ave", "Elm Dr", "Maple Ln", "Cedar Rd", "Pine St", "Birch Ave",
    "Walnut Dr", "Cherry Ln", "Spruce Rd", "Washington Blvd", "Lincoln Ave",
]

CITIES = [
    "Springfield", "Riverside", "Georgetown", "Fairview", "Madison",
    "Clinton", "Franklin", "Arlington", "Salem", "Burlington",
]

STATES = ["CA", "TX", "FL", "NY", "IL", "PA", "OH", "GA", "NC", "MI"]

GENDERS = ["male", "female", "other", "prefer-not-to-say"]

ALLERGY_OPTIONS = [[], ["Penicillin"], ["Sulfa drugs"], ["NSAIDs"], ["Latex"],
                   ["Penicillin", "Sulfa drugs"], ["Codeine"]]

PROFILES = [
    {
        "history": "Type 2 Diabetes, diagnosed {years} years ago.",
        "medications": ["Metformin 500mg BID", "Lisinopril 10mg QD"],
        "results": ["Diabetic neuropathy", "No significant findings"],
    },
    {
        "history": "Hypertension, managed with medication for {years} years.",
        "medications": ["Amlodipine 5mg QD", "Hydrochlorothiazide 25mg QD"],
        "results": ["Hypertensive heart disease", "No significant findings"],
    },
    {
        "history": "Asthma since childhood, last exacerbation {years} years ago.",
        "medications": ["Fluticasone inhaler BID", "Albuterol PRN"],
        "results": ["Mild persistent asthma"],
    },
    {
        "history": "Family history of Parkinson's disease. Reports tremor for {years} years.",
        "medications": [],
        "results": ["Early-stage Parkinson's disease", "Essential tremor"],
    },
    {
        "history": "Post-stroke follow-up, event {years} years ago.",
        "medications": ["Apixaban 5mg BID", "Atorvastatin 40mg QHS"],
        "results": ["Mild dysarthria", "Residual hemiparesis"],
    },
]


def generate_dob(rng: random.Random, min_age: int = 18, max_age: int = 85) -> str:
    age = rng.randint(min_age, max_age)
    return (date.today() - timedelta(days=age * 365 + rng.randint(0, 364))).isoformat()


def generate_phone(rng: random.Random) -> str:
    return f"{rng.randint(200, 989)}{rng.randint(200, 999)}{rng.randint(1000, 9999)}"


def generate_address(rng: random.Random) -> str:
    num = rng.randint(100, 9999)
    street = rng.choice(STREETS)
    city = rng.choice(CITIES)
    state = rng.choice(STATES)
    zip_code = rng.randint(10000, 99999)
    return f"{num} {street}, {city}, {state} {zip_code}"


def build_patient(rng: random.Random, index: int) -> dict:
    """Build one repository payload. ``index`` keeps the generated email unique."""
    gender = rng.choice(GENDERS)
    names = FIRST_NAMES_F if gender == "female" else FIRST_NAMES_M
    first_name = rng.choice(names)
    last_name = rng.choice(LAST_NAMES)
    profile = rng.choice(PROFILES)
    slug = f"{first_name}.{last_name}.{index}".lower()

    fields = {
        "first_name": first_name,
        "last_name": last_name,
        "email": f"{slug}@example.com",
        "phone": generate_phone(rng),
        "date_of_birth": generate_dob(rng),
        "gender": gender,
        "address": generate_address(rng),
        "medical_history": profile["history"].format(years=rng.randint(1, 20)),
        "allergies": list(rng.choice(ALLERGY_OPTIONS)),
        "medications": list(profile["medications"]),
        "audio_file_url": f"https://media.example.com/audio/{slug}.wav",
        "video_file_url": f"https://media.example.com/video/{slug}.mp4",
        "last_visit": datetime.now(timezone.utc) - timedelta(days=rng.randint(1, 90)),
    }

    # Roughly half of the seeded patients already have a diagnosis
    if rng.random() < 0.5:
        fields["model_result"] = rng.choice(profile["results"])
        fields["model_confidence"] = round(rng.uniform(0.55, 0.99), 2)
        fields["status"] = "confirmed"
    return fields


async def generate(count: int, seed: int = None, reset: bool = False):
    rng = random.Random(seed)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as db:
        if reset:
            await db.execute(delete(Patient))
            await db.commit()
            print("Removed existing patients.")

        existing = await db.scalar(select(func.count(Patient.id))) or 0
        print(f"Generating {count} synthetic patients ({existing} already stored)...")

        created = 0
        for i in range(count):
            try:
                await patient_repository.create(db, build_patient(rng, existing + i + 1))
                created += 1
            except PatientConflictError:
                print(f"  Skipping duplicate email for patient #{existing + i + 1}")

        print(f"Created {created} patients.")
    await engine.dispose()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Generate synthetic patients for the dashboard")
    parser.add_argument("--count", type=int, default=50, help="Number of patients to create")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible data")
    parser.add_argument("--reset", action="store_true", help="Delete existing patients first")
    args = parser.parse_args()
    asyncio.run(generate(args.count, seed=args.seed, reset=args.reset))
