import logging
from sqlalchemy.orm import sessionmaker
from app.directory.models.campus import Campus
from app.directory.models.student import Student

logger = logging.getLogger(__name__)

SAMPLE_CAMPUSES = [
    {
        "name": "Hunter College",
        "address": "695 Park Ave, New York, NY 10065",
        "description": "This is a school in New York, New York.",
    },
    {
        "name": "Queens College",
        "address": "65-30 Kissena Blvd, Queens, NY 11367",
        "description": "This is a school in Queens, New York.",
    },
    {
        "name": "Brooklyn College",
        "address": "2900 Bedford Ave, Brooklyn, NY 11210",
        "description": "This is a school in Brooklyn, New York.",
    },
]

# campus — индекс в SAMPLE_CAMPUSES или None
SAMPLE_STUDENTS = [
    {"firstname": "Joe", "lastname": "Smith", "email": "joe.smith@example.edu", "gpa": 3.5, "campus": 0},
    {"firstname": "Mary", "lastname": "Johnson", "email": "mary.johnson@example.edu", "gpa": 3.9, "campus": 0},
    {"firstname": "Ana", "lastname": "Lopez", "email": "ana.lopez@example.edu", "gpa": 3.2, "campus": 1},
    {"firstname": "Sam", "lastname": "Lee", "email": "sam.lee@example.edu", "gpa": None, "campus": None},
]


def seed_sample_data(session_factory: sessionmaker) -> None:
    """Insert the sample campuses and students. Expects empty tables."""
    db = session_factory()
    try:
        campuses = [Campus(**data) for data in SAMPLE_CAMPUSES]
        db.add_all(campuses)
        db.flush()

        for data in SAMPLE_STUDENTS:
            data = dict(data)
            campus_index = data.pop("campus")
            student = Student(**data)
            if campus_index is not None:
                student.campus_id = campuses[campus_index].id
            db.add(student)

        db.commit()
        logger.info(f"Seeded {len(SAMPLE_CAMPUSES)} campuses and {len(SAMPLE_STUDENTS)} students")
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
