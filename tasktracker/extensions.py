"""Flask extensions initialization."""

from flask_marshmallow import Marshmallow
from flask_sqlalchemy import SQLAlchemy


# Task store
db = SQLAlchemy()

# Marshmallow serialization instance
ma = Marshmallow()
