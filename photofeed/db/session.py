import logging
import psycopg2
from psycopg2 import errors, sql
from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker
from photofeed.core import config


# Try to create the DB if it doesn't exist (PostgreSQL only)
def create_database_if_missing(database_url: str = config.DATABASE_URL):
    url = make_url(database_url)
    if not url.drivername.startswith("postgresql"):
        return
    try:
        conn = psycopg2.connect(
            dbname="postgres",
            user=url.username,
            password=url.password,
            host=url.host,
            port=url.port,
        )
    except psycopg2.Error as e:
        logging.warning(f"Could not connect to PostgreSQL server: {e}")
        return

    conn.autocommit = True
    try:
        with conn.cursor() as cur:
            cur.execute(sql.SQL("CREATE DATABASE {}").format(sql.Identifier(url.database)))
        logging.info(f"Created database {url.database}")
    except errors.DuplicateDatabase:
        pass
    except psycopg2.Error as e:
        logging.warning(f"Could not create database {url.database}: {e}")
    finally:
        conn.close()


def make_engine(database_url: str = config.DATABASE_URL):
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    return create_engine(database_url, connect_args=connect_args)


engine = make_engine()
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
