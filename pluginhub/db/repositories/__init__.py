from pluginhub.db.repositories.apps import AppRepository
from pluginhub.db.repositories.versions import AppVersionRepository
from pluginhub.db.repositories.customizations import CustomizationRepository

__all__ = ['AppRepository', 'AppVersionRepository', 'CustomizationRepository']
