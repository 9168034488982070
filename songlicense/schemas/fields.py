from typing import Annotated
from pydantic import Field

# ids live in signed 64-bit integer columns
MAX_ID = 2 ** 63 - 1
MAX_U32 = 2 ** 32 - 1

Id = Annotated[int, Field(ge=0, le=MAX_ID)]
U32 = Annotated[int, Field(ge=0, le=MAX_U32)]
