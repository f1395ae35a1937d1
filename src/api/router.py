from fastapi import APIRouter

from src.api.auth.router import me_router
from src.api.auth.router import router as auth_router
from src.api.campaign.router import router as campaign_router
from src.api.designation.router import router as designation_router
from src.api.donation.router import router as donation_router
from src.api.health.router import router as health_router
from src.api.organization.router import router as organization_router
from src.api.page.router import router as page_router
from src.api.public.router import router as public_router
from src.api.staff.router import router as staff_router
from src.api.stats.router import router as stats_router
from src.api.stripe.router import connect_router as stripe_connect_router
from src.api.stripe.router import router as stripe_webhook_router
from src.api.upload.router import router as upload_router

# Staff-facing CRM API
crm_router = APIRouter(prefix="/api/crm")
crm_router.include_router(auth_router)
crm_router.include_router(me_router)
crm_router.include_router(campaign_router)
crm_router.include_router(designation_router)
crm_router.include_router(donation_router)
crm_router.include_router(organization_router)
crm_router.include_router(page_router)
crm_router.include_router(staff_router)
crm_router.include_router(stats_router)
crm_router.include_router(stripe_connect_router)
crm_router.include_router(upload_router)

# Anonymous and donor-facing site API
public_api_router = APIRouter(prefix="/api/public")
public_api_router.include_router(public_router)

# Main API router
api_router = APIRouter()
api_router.include_router(health_router)
api_router.include_router(stripe_webhook_router)
api_router.include_router(crm_router)
api_router.include_router(public_api_router)
