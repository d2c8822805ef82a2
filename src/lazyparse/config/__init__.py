"""
Pipeline configuration.

Classification tables and source settings, loadable from YAML.
"""

from .schema import PipelineConfig, LexerConfig, SourceConfig
from .loader import load_config, load_config_from_string, ConfigLoadError

__all__ = ['PipelineConfig', 'LexerConfig', 'SourceConfig',
           'load_config', 'load_config_from_string', 'ConfigLoadError']
