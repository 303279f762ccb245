from recuerdamed.models.model_base import Base
from recuerdamed.models.model_user import User
from recuerdamed.models.model_patient_profile import PatientProfile
from recuerdamed.models.model_caregiver_invite import CaregiverInvite
from recuerdamed.models.model_permission import Permission
from recuerdamed.models.model_medication import Medication
from recuerdamed.models.model_appointment import Appointment
from recuerdamed.models.model_treatment import Treatment
from recuerdamed.models.model_note import Note
from recuerdamed.models.model_push_subscription import PushSubscription
