from sqlalchemy import Boolean, CheckConstraint, Column, DateTime, Integer, String, Text, func
from jobboard.database import Base


class Company(Base):
    __tablename__ = "companies"
    __table_args__ = (
        CheckConstraint("size IN ('startup', 'small', 'medium', 'large')", name="chk_companies_size"),
    )

    id = Column(String(50), primary_key=True)
    name = Column(String(255), nullable=False)
    logo = Column(String(500))
    description = Column(Text)
    website = Column(String(500))
    industry = Column(String(100))
    size = Column(String(20))
    founded = Column(Integer)
    headquarters = Column(String(255))
    verified = Column(Boolean, default=False)
    featured = Column(Boolean, default=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now())
