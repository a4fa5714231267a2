"""Field Types — strict primitives used by every payload schema.

Invariants:
    - Number accepts int or float, never bool or numeric strings
    - Text accepts str only
    - Ints stay ints (no widening to float on the way through)
"""

from typing import Union

from pydantic import StrictFloat, StrictInt, StrictStr

Number = Union[StrictInt, StrictFloat]
Text = StrictStr
