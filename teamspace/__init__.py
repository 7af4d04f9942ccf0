"""
Teamspace - Team entity service

This package owns the Team aggregate of the collaboration platform:
- Identity attributes and field validation
- Public URL resolution (custom domain, subdomain, default URL)
- Team preferences
- Sign-in domain allow-list
- First-collection provisioning for new workspaces
- Cleanup of replaced team avatars
"""

__version__ = "1.0.0"

from teamspace.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
