from typing import List, Optional
from fastapi import Depends
from sqlalchemy.orm import Session
from recuerdamed.db.base import get_db
from recuerdamed.models.model_permission import Permission


class PermissionRepository:
    def __init__(self, db_session: Session = Depends(get_db)):
        self.db = db_session

    def get(self, profile_id: int, caregiver_id: int) -> Optional[Permission]:
        return self.db.query(Permission).filter(
            Permission.profile_id == profile_id,
            Permission.caregiver_id == caregiver_id
        ).first()

    def get_by_id(self, permission_id: int) -> Optional[Permission]:
        return self.db.query(Permission).filter(Permission.permission_id == permission_id).first()

    def list_by_profile(self, profile_id: int) -> List[Permission]:
        return self.db.query(Permission).filter(
            Permission.profile_id == profile_id
        ).order_by(Permission.permission_id).all()

    def list_by_caregiver(self, caregiver_id: int) -> List[Permission]:
        return self.db.query(Permission).filter(
            Permission.caregiver_id == caregiver_id
        ).order_by(Permission.permission_id).all()

    def upsert(self, profile_id: int, caregiver_id: int, level: str) -> Permission:
        permission = self.get(profile_id, caregiver_id)
        if permission:
            permission.level = level
        else:
            permission = Permission(profile_id=profile_id, caregiver_id=caregiver_id, level=level)
            self.db.add(permission)
        self.db.commit()
        self.db.refresh(permission)
        return permission

    def update(self, permission: Permission) -> Permission:
        self.db.commit()
        self.db.refresh(permission)
        return permission

    def delete(self, permission: Permission) -> None:
        self.db.delete(permission)
        self.db.commit()
