
# Namespace for pipeline steps
from .load_demo_companies import LoadDemoCompanies  # noqa: F401
from .validate_companies import ValidateCompanies  # noqa: F401
from .persist_companies import PersistCompanies  # noqa: F401
