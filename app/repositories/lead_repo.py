"""Database access helpers for leads."""

from __future__ import annotations

from collections.abc import Sequence

from sqlmodel import Session, col, select

from app.models.lead import Lead


def list_leads(session: Session) -> Sequence[Lead]:
    """Return all leads, newest first."""

    return session.exec(select(Lead).order_by(col(Lead.created_at).desc())).all()


def create_lead(session: Session, lead: Lead) -> Lead:
    """Persist a new lead."""

    session.add(lead)
    session.commit()
    session.refresh(lead)
    return lead
