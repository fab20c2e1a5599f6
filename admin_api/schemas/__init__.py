from .product import ProductCreate, ProductUpdate, ProductRestock
from .order import OrderStatusUpdate
from .stats import StatsRead
from .health import HealthRead
