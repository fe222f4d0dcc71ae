# scripts/init_db.py
import os
from dotenv import load_dotenv
from app.services.profile_store import PostgresProfileStore

# Load environment variables from .env file
load_dotenv()

# Retrieve the database connection URL
db_url = os.getenv("DATABASE_URL")
if not db_url:
    raise RuntimeError("DATABASE_URL is not set")

print(f"Connecting to database: {db_url}")

# Create the 'software_engineer' table if it does not exist yet
store = PostgresProfileStore(db_url)
store.init_schema()
print("Schema has been successfully created or verified.")
