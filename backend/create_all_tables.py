"""Create the contacts table using SQLAlchemy Base.metadata"""
import sys
from pathlib import Path

# Add backend directory to path for imports
BACKEND_DIR = Path(__file__).resolve().parent
sys.path.insert(0, str(BACKEND_DIR))

# Load environment variables
from dotenv import load_dotenv

load_dotenv(BACKEND_DIR.parent / ".env")

from sqlalchemy import inspect

from contact_app.core.database import get_engine, init_db

if __name__ == "__main__":
    print("Creating tables from models...")
    engine = get_engine()
    init_db(engine)

    tables = inspect(engine).get_table_names()
    print(f"\n{len(tables)} tables present:")
    for table in sorted(tables):
        print(f"  {table}")
