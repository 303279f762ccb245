import enum


class UserRole(str, enum.Enum):
    PATIENT = 'PATIENT'
    CAREGIVER = 'CAREGIVER'


class PermissionLevel(str, enum.Enum):
    """Access level a caregiver holds on a patient profile: READ < WRITE < ADMIN."""
    READ = 'READ'
    WRITE = 'WRITE'
    ADMIN = 'ADMIN'

    @property
    def rank(self) -> int:
        return _PERMISSION_RANK[self]

    def allows(self, required: 'PermissionLevel') -> bool:
        return self.rank >= PermissionLevel(required).rank


_PERMISSION_RANK = {
    PermissionLevel.READ: 1,
    PermissionLevel.WRITE: 2,
    PermissionLevel.ADMIN: 3,
}


class Gender(str, enum.Enum):
    MALE = 'MALE'
    FEMALE = 'FEMALE'
    OTHER = 'OTHER'


class MedicationFrequency(str, enum.Enum):
    DAILY = 'DAILY'
    WEEKLY = 'WEEKLY'
    CUSTOM = 'CUSTOM'


class AppointmentStatus(str, enum.Enum):
    SCHEDULED = 'SCHEDULED'
    COMPLETED = 'COMPLETED'
    CANCELLED = 'CANCELLED'
