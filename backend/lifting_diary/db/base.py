from sqlalchemy.orm import DeclarativeBase

# Upper bound of the 32-bit INTEGER columns (ids, reps)
INT32_MAX = 2_147_483_647


class Base(DeclarativeBase):
    pass
