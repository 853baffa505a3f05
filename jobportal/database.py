from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, declarative_base
from jobportal.core.config import settings

# Process-wide storage handle. Sessions are handed out per request by get_db;
# the schema is created in init_db() and the pool released in close_db(),
# both driven by the application lifespan.
DATABASE_URL = settings.database_url

def configure_sqlite_locking(engine):
    """
    Start every SQLite transaction with BEGIN IMMEDIATE.
    With pysqlite's deferred BEGIN, two writers can each hold a read lock and
    SQLite fails one with "database is locked" instead of letting it wait.
    """
    @event.listens_for(engine, "connect")
    def _disable_pysqlite_begin(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _begin_immediate(conn):
        conn.exec_driver_sql("BEGIN IMMEDIATE")

if DATABASE_URL.startswith("postgresql"):
    engine = create_engine(DATABASE_URL)
else:
    # SQLite configuration for local development/testing
    engine = create_engine(
        DATABASE_URL, connect_args={"check_same_thread": False}
    )
    configure_sqlite_locking(engine)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()

def get_db():
    """
    Session Provider: Provides a database session per request.
    Transaction management is handled explicitly in the Service Layer.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def init_db():
    """
    Registers the document models and creates the schema.
    Called once from the application startup lifespan.
    """
    from jobportal.models import job, job_application  # noqa: F401
    Base.metadata.create_all(bind=engine)

def close_db():
    """Releases pooled connections at shutdown."""
    engine.dispose()
