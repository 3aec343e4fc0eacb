from course_management.db.session import SessionLocal


# one session (one pooled connection) per request, always released
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
