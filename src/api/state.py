from typing import Optional

from keyprompt.models import ApiConfig
from storage.config_store import ApiConfigStore

# Global instances initialized at startup
config_store: Optional[ApiConfigStore] = None
api_config: ApiConfig = ApiConfig()
