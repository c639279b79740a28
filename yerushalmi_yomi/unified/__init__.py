"""Torah Yomi Unified Channel integration."""

from .publisher import TorahYomiPublisher, is_unified_channel_enabled, publish_daily_daf

__all__ = ["TorahYomiPublisher", "is_unified_channel_enabled", "publish_daily_daf"]
