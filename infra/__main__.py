"""Pulumi entry point for the trust store certificate stack."""
import logging

import structlog

from truststore_infra.__main__ import TrustStoreStack
from truststore_infra.config import ProviderSettings

structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(logging.INFO))
TrustStoreStack(settings=ProviderSettings.load()).run()
