"""CMS package: outbound HTTP access to the headless CMS."""

from cmsproxy.cms.client import CMSClient

__all__ = ["CMSClient"]
