from fastapi import APIRouter

from recuerdamed.api import (
    api_auth, api_healthcheck, api_user, api_patient_profile, api_caregiver_invite, api_caregiver,
    api_permission, api_medication, api_appointment, api_treatment, api_note, api_push_subscription
)

router = APIRouter()

router.include_router(api_healthcheck.router, tags=["health-check"], prefix="/healthcheck")
router.include_router(api_auth.router, tags=["authentication"], prefix="/auth")
router.include_router(api_user.router, tags=["user"], prefix="/users")
router.include_router(api_patient_profile.router, tags=["patient-profile"], prefix="/patient-profiles")
router.include_router(api_caregiver_invite.router, tags=["caregiver-invite"], prefix="/caregiver-invites")
router.include_router(api_caregiver.router, tags=["caregiver"], prefix="/caregivers")
router.include_router(api_permission.router, tags=["permission"], prefix="/permissions")
router.include_router(api_medication.router, tags=["medication"], prefix="/medications")
router.include_router(api_appointment.router, tags=["appointment"], prefix="/appointments")
router.include_router(api_treatment.router, tags=["treatment"], prefix="/treatments")
router.include_router(api_note.router, tags=["note"], prefix="/notes")
router.include_router(api_push_subscription.router, tags=["push-subscription"], prefix="/push-subscriptions")
