from datetime import datetime
from typing import List, Optional
from fastapi import Depends
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from recuerdamed.db.base import get_db
from recuerdamed.models.model_caregiver_invite import CaregiverInvite
from recuerdamed.models.model_permission import Permission


class CaregiverInviteRepository:
    def __init__(self, db_session: Session = Depends(get_db)):
        self.db = db_session

    def create(self, profile_id: int, code: str, expires_at: datetime) -> CaregiverInvite:
        invite = CaregiverInvite(profile_id=profile_id, code=code, expires_at=expires_at, used=False)
        self.db.add(invite)
        self.db.commit()
        self.db.refresh(invite)
        return invite

    def get_by_code(self, code: str) -> Optional[CaregiverInvite]:
        return self.db.query(CaregiverInvite).filter(CaregiverInvite.code == code).first()

    def code_exists(self, code: str) -> bool:
        return self.db.query(CaregiverInvite.invite_id).filter(CaregiverInvite.code == code).first() is not None

    def list_active(self, profile_id: int, now: datetime) -> List[CaregiverInvite]:
        return self.db.query(CaregiverInvite).filter(
            CaregiverInvite.profile_id == profile_id,
            CaregiverInvite.used.is_(False),
            CaregiverInvite.expires_at > now
        ).order_by(CaregiverInvite.created_at.desc(), CaregiverInvite.invite_id.desc()).all()

    def mark_used(self, invite_id: int, now: datetime) -> bool:
        """
        Conditionally flip an invite to used. Only a still-redeemable row is touched,
        so of two concurrent callers at most one sees True. Does not commit.
        """
        affected = self.db.query(CaregiverInvite).filter(
            CaregiverInvite.invite_id == invite_id,
            CaregiverInvite.used.is_(False),
            CaregiverInvite.expires_at > now
        ).update({CaregiverInvite.used: True}, synchronize_session=False)
        return affected == 1

    def redeem(self, invite: CaregiverInvite, caregiver_id: int, level: str, now: datetime) -> Optional[Permission]:
        """
        Claim the invite and grant the caregiver access to its profile in one transaction.
        An existing grant keeps its level. Returns None when the invite could not be claimed;
        raises IntegrityError when a concurrent grant for the same pair won the insert.
        """
        try:
            if not self.mark_used(invite.invite_id, now):
                self.db.rollback()
                return None

            permission = self.db.query(Permission).filter(
                Permission.profile_id == invite.profile_id,
                Permission.caregiver_id == caregiver_id
            ).first()
            if not permission:
                permission = Permission(profile_id=invite.profile_id, caregiver_id=caregiver_id, level=level)
                self.db.add(permission)
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise

        self.db.refresh(permission)
        return permission
