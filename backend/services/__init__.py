"""Services for the Tag Cloud Generator."""
from .errors import (
    CloudError,
    TagCloudError,
    InvalidPositionError,
    InvalidCountError,
    InvalidScaleError,
    EmptyDocumentError,
    DocumentLoadError,
)
from .separator_set import SeparatorSet, configured_separators
from .tokenizer import next_token, tokenize
from .frequency_aggregator import FrequencyAggregator, canonicalize
from .rank_selector import RankedSelection, CountValidation, rank, select_top, validate_count
from .alphabetizer import alphabetize
from .font_scaler import FontScaler, font_size
from .tag_cloud_generator import TagCloudGenerator
from .cloud_renderer import CloudRenderer
from .document_loader import DocumentLoader

__all__ = ['CloudError', 'TagCloudError', 'InvalidPositionError', 'InvalidCountError', 'InvalidScaleError', 'EmptyDocumentError', 'DocumentLoadError', 'SeparatorSet', 'configured_separators', 'next_token', 'tokenize', 'FrequencyAggregator', 'canonicalize', 'RankedSelection', 'CountValidation', 'rank', 'select_top', 'validate_count', 'alphabetize', 'FontScaler', 'font_size', 'TagCloudGenerator', 'CloudRenderer', 'DocumentLoader']
