from datetime import datetime
from fastapi import Depends
import logging
from recuerdamed.repository.repo_patient_profile import PatientProfileRepository
from recuerdamed.repository.repo_clinical_record import MedicationRepository, AppointmentRepository
from recuerdamed.schemas.sche_patient_profile import (
    PatientProfileSaveRequest, PatientProfileUpdateRequest, CalendarResponse, CalendarDay,
    CalendarMedicationItem, CalendarAppointmentItem
)
from recuerdamed.schemas.sche_token import CurrentUser
from recuerdamed.models.model_patient_profile import PatientProfile
from recuerdamed.helpers.enums import PermissionLevel
from recuerdamed.helpers.exception_handler import NotFoundException, UnauthorizedException, ValidationException
from recuerdamed.services.srv_access import AccessService
from recuerdamed.services.srv_clinical_record import column_values

logger = logging.getLogger(__name__)


class PatientProfileService:
    def __init__(self, profile_repo: PatientProfileRepository = Depends(),
                 access_service: AccessService = Depends(),
                 medication_repo: MedicationRepository = Depends(),
                 appointment_repo: AppointmentRepository = Depends()):
        self.profile_repo = profile_repo
        self.access_service = access_service
        self.medication_repo = medication_repo
        self.appointment_repo = appointment_repo

    def get_my_profile(self, current_user: CurrentUser) -> PatientProfile:
        profile = self.profile_repo.get_profile_by_patient_id(current_user.user_id)
        if not profile:
            raise NotFoundException(message="Patient profile not found")
        return profile

    def save_my_profile(self, data: PatientProfileSaveRequest, current_user: CurrentUser) -> PatientProfile:
        """Create the caller's profile on first save, update it afterwards."""
        if not current_user.is_patient:
            raise UnauthorizedException(message="Only patients own a patient profile")

        values = column_values(data.model_dump(exclude_unset=True))
        profile = self.profile_repo.get_profile_by_patient_id(current_user.user_id)
        if profile is None:
            profile = self.profile_repo.create_profile(PatientProfile(patient_id=current_user.user_id, **values))
            logger.info(f"Patient profile {profile.profile_id} created for user_id={current_user.user_id}")
            return profile

        for field, value in values.items():
            setattr(profile, field, value)
        return self.profile_repo.update_profile(profile)

    def get_profile(self, profile_id: int, current_user: CurrentUser) -> PatientProfile:
        return self.access_service.authorize(current_user, profile_id, PermissionLevel.READ)

    def update_profile(self, profile_id: int, data: PatientProfileUpdateRequest,
                       current_user: CurrentUser) -> PatientProfile:
        profile = self.access_service.authorize(current_user, profile_id, PermissionLevel.WRITE)
        for field, value in column_values(data.model_dump(exclude_unset=True)).items():
            setattr(profile, field, value)
        return self.profile_repo.update_profile(profile)

    def get_calendar(self, profile_id: int, year: int, month: int, current_user: CurrentUser) -> CalendarResponse:
        """
        Bucket one month of a profile's medications (by start date) and appointments
        (by date and time) into days keyed YYYY-MM-DD.
        """
        if not 1 <= month <= 12:
            raise ValidationException(message="month must be between 1 and 12")
        self.access_service.authorize(current_user, profile_id, PermissionLevel.READ)

        start = datetime(year, month, 1)
        end = datetime(year + 1, 1, 1) if month == 12 else datetime(year, month + 1, 1)
        days = {}

        for medication in self.medication_repo.list_starting_between(profile_id, start, end):
            day = days.setdefault(medication.start_date.strftime('%Y-%m-%d'), CalendarDay())
            day.medications.append(CalendarMedicationItem(
                medication_id=medication.medication_id,
                name=medication.name,
                time=medication.start_date.strftime('%H:%M'),
                dosage=medication.dosage,
                type=medication.type,
            ))

        for appointment in self.appointment_repo.list_between(profile_id, start, end):
            day = days.setdefault(appointment.date_time.strftime('%Y-%m-%d'), CalendarDay())
            day.appointments.append(CalendarAppointmentItem(
                appointment_id=appointment.appointment_id,
                title=appointment.title,
                time=appointment.date_time.strftime('%H:%M'),
                location=appointment.location,
                status=appointment.status,
            ))

        return CalendarResponse(profile_id=profile_id, year=year, month=month, days=dict(sorted(days.items())))
