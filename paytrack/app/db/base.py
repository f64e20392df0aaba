from paytrack.app.db.base_class import Base

# Import models to register metadata for Base.metadata.create_all in tests
from paytrack.app.models.user import User  # noqa: F401
from paytrack.app.models.customer import Customer  # noqa: F401
from paytrack.app.models.purchase import Purchase  # noqa: F401
from paytrack.app.models.payment import Payment  # noqa: F401
