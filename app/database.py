from typing import Dict, Any

# In-memory product store. Insertion order is the listing order.

PRODUCTS: Dict[str, Dict[str, Any]] = {}
