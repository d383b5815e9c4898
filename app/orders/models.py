from sqlalchemy import Column, String, Integer, Float, DateTime, Text, func
from ..database.core import Base

class Order(Base):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, autoincrement=True)
    # File reference: disk path or object key, plus its URL
    file_url = Column(Text, nullable=True)
    file_path = Column(Text, nullable=True)
    s3_key = Column(String(512), nullable=True)
    material = Column(String(100), nullable=True)
    color = Column(String(100), nullable=True)
    infill = Column(String(20), nullable=True)
    quality = Column(String(100), nullable=True)
    weight = Column(Float, nullable=False, default=0.0)
    cost_usd = Column(Float, nullable=False)
    cost_inr = Column(Float, nullable=False)
    customer_name = Column(String(255), nullable=True)
    email = Column(String(255), nullable=True)
    phone = Column(String(50), nullable=True)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
