from dotenv import load_dotenv
import os

load_dotenv()

class Config:
    # Kept as the raw string; StringReplacingReader validates it when it is used.
    STREAMREPLACE_READ_CHUNK_SIZE = os.getenv("STREAMREPLACE_READ_CHUNK_SIZE", "1")
    STREAMREPLACE_FACTORY_MODE = os.getenv("STREAMREPLACE_FACTORY_MODE", "reader")

config = Config()
