# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from sqlalchemy.orm import DeclarativeBase

"""
Base declarativa do ORM.


- `Base` concentra o `metadata` usado pelo sync de schema.
- Modelos em `app.db.models` herdam daqui.
"""

class Base(DeclarativeBase):
    pass
