from sqlalchemy import (
    JSON,
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    func,
)
from jobboard.database import Base


class Job(Base):
    __tablename__ = "jobs"
    __table_args__ = (
        CheckConstraint("type IN ('full-time', 'part-time', 'contract', 'internship')", name="chk_jobs_type"),
        CheckConstraint("experience_level IN ('entry', 'mid', 'senior')", name="chk_jobs_experience_level"),
        CheckConstraint("remote_option IN ('on-site', 'hybrid', 'remote')", name="chk_jobs_remote_option"),
        CheckConstraint("applicants >= 0", name="chk_jobs_applicants_non_negative"),
        CheckConstraint(
            "application_deadline IS NULL OR posted_at IS NULL OR application_deadline > posted_at",
            name="chk_jobs_deadline_valid",
        ),
    )

    id = Column(String(36), primary_key=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    # Legacy company name, kept alongside company_id
    company = Column(String(255), nullable=False)
    company_id = Column(String(50), ForeignKey("companies.id", ondelete="RESTRICT", onupdate="CASCADE"), index=True)
    company_logo_url = Column(Text)
    location = Column(String(255), index=True)
    type = Column(String(20))
    experience_level = Column(String(20))
    remote_option = Column(String(20))
    salary = Column(JSON)  # {"min", "max", "currency", "period"}
    requirements = Column(JSON)
    responsibilities = Column(JSON)
    benefits = Column(JSON)
    tags = Column(JSON)
    posted_at = Column(DateTime(timezone=True), index=True)
    application_deadline = Column(DateTime(timezone=True))
    applicants = Column(Integer, default=0)
    featured = Column(Boolean, default=False)
    active = Column(Boolean, default=True, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now())
