"""ORM Models — SQLAlchemy declarative models, one per document collection.

Invariants:
    - All models inherit from Base (db/base.py)
    - Task and Transaction are independent: no foreign keys, no cascades
"""

from pretalab_api.models.task import Task  # noqa: F401
from pretalab_api.models.transaction import Transaction  # noqa: F401
