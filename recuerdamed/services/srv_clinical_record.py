import enum
import logging
from typing import Any, Dict

from fastapi import Depends
from pydantic import BaseModel

from recuerdamed.helpers.enums import PermissionLevel
from recuerdamed.helpers.exception_handler import ForbiddenException, ValidationException
from recuerdamed.helpers.paging import Page, PaginationParams, paginate
from recuerdamed.repository.repo_clinical_record import (
    ClinicalRecordRepository, MedicationRepository, AppointmentRepository, TreatmentRepository, NoteRepository
)
from recuerdamed.schemas.sche_token import CurrentUser
from recuerdamed.services.srv_access import AccessService

logger = logging.getLogger(__name__)


def column_values(data: Dict[str, Any]) -> Dict[str, Any]:
    return {field: value.value if isinstance(value, enum.Enum) else value for field, value in data.items()}


class ClinicalRecordService:
    """
    Permission-gated CRUD shared by medications, appointments, treatments and notes.
    Reads need READ on the record's profile, every mutation needs WRITE.
    """
    record_name = 'record'

    def __init__(self, repo: ClinicalRecordRepository, access_service: AccessService):
        self.repo = repo
        self.access_service = access_service

    def prepare_create(self, values: Dict[str, Any], current_user: CurrentUser) -> Dict[str, Any]:
        return values

    def validate_values(self, values: Dict[str, Any]) -> None:
        pass

    def reject_required_nulls(self, values: Dict[str, Any]) -> None:
        columns = self.repo.model.__table__.columns
        required = [field for field, value in values.items() if value is None and not columns[field].nullable]
        if required:
            raise ValidationException(message=f"{', '.join(required)} cannot be null")

    def _get_authorized(self, record_id: int, current_user: CurrentUser, required_level: PermissionLevel):
        record = self.repo.get_by_id(record_id)
        if record is None:
            # Same answer as a denied request so ids cannot be guessed
            logger.warning(f"{self.record_name} {record_id} requested by user_id={current_user.user_id} does not exist")
            raise ForbiddenException()
        self.access_service.authorize(current_user, record.profile_id, required_level)
        return record

    def list_records(self, profile_id: int, params: PaginationParams, current_user: CurrentUser) -> Page:
        self.access_service.authorize(current_user, profile_id, PermissionLevel.READ)
        return paginate(self.repo.model, self.repo.query_by_profile(profile_id), params)

    def get_record(self, record_id: int, current_user: CurrentUser):
        return self._get_authorized(record_id, current_user, PermissionLevel.READ)

    def create_record(self, data: BaseModel, current_user: CurrentUser):
        values = column_values(data.model_dump())
        self.access_service.authorize(current_user, values['profile_id'], PermissionLevel.WRITE)
        self.validate_values(values)
        record = self.repo.create(self.prepare_create(values, current_user))
        logger.info(f"{self.record_name} created for profile_id={record.profile_id} by user_id={current_user.user_id}")
        return record

    def update_record(self, record_id: int, data: BaseModel, current_user: CurrentUser):
        record = self._get_authorized(record_id, current_user, PermissionLevel.WRITE)
        values = column_values(data.model_dump(exclude_unset=True))
        self.reject_required_nulls(values)
        current = {field: getattr(record, field) for field in type(data).model_fields}
        self.validate_values({**current, **values})
        return self.repo.update(record, values)

    def delete_record(self, record_id: int, current_user: CurrentUser) -> None:
        record = self._get_authorized(record_id, current_user, PermissionLevel.WRITE)
        self.repo.delete(record)
        logger.info(f"{self.record_name} {record_id} deleted by user_id={current_user.user_id}")


class MedicationService(ClinicalRecordService):
    record_name = 'Medication'

    def __init__(self, repo: MedicationRepository = Depends(), access_service: AccessService = Depends()):
        super().__init__(repo, access_service)

    def validate_values(self, values: Dict[str, Any]) -> None:
        if values.get('end_date') and values.get('start_date') and values['end_date'] < values['start_date']:
            raise ValidationException(message='end_date must not be before start_date')


class AppointmentService(ClinicalRecordService):
    record_name = 'Appointment'

    def __init__(self, repo: AppointmentRepository = Depends(), access_service: AccessService = Depends()):
        super().__init__(repo, access_service)

    def prepare_create(self, values: Dict[str, Any], current_user: CurrentUser) -> Dict[str, Any]:
        if current_user.is_caregiver:
            values['caregiver_id'] = current_user.user_id
        return values


class TreatmentService(ClinicalRecordService):
    record_name = 'Treatment'

    def __init__(self, repo: TreatmentRepository = Depends(), access_service: AccessService = Depends()):
        super().__init__(repo, access_service)

    def validate_values(self, values: Dict[str, Any]) -> None:
        if values.get('end_date') and values.get('start_date') and values['end_date'] < values['start_date']:
            raise ValidationException(message='end_date must not be before start_date')


class NoteService(ClinicalRecordService):
    record_name = 'Note'

    def __init__(self, repo: NoteRepository = Depends(), access_service: AccessService = Depends()):
        super().__init__(repo, access_service)

    def prepare_create(self, values: Dict[str, Any], current_user: CurrentUser) -> Dict[str, Any]:
        values['author_id'] = current_user.user_id
        return values
