# Standard library imports
import enum

# Third-party imports
from sqlalchemy import Enum as SQLEnum


class BookCategory(str, enum.Enum):
    FICTION = "fiction"
    NON_FICTION = "non-fiction"


# Shared column type so every table stores the value ("non-fiction"), not the name
book_category_type = SQLEnum(BookCategory, name="book_category", values_callable=lambda e: [m.value for m in e])
