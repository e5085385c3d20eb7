"""Error-return analysis: classification, extraction and aggregation."""

from errauditor.analysis.aggregator import Aggregator, aggregate
from errauditor.analysis.classifier import classify_function
from errauditor.analysis.extractor import ReturnSiteExtractor, describe, extract_descriptors
from errauditor.analysis.passes import AnalysisPass, Analyzer, analyzer
from errauditor.analysis.walker import AuditSink, walk_file

__all__ = [
    "Aggregator",
    "AnalysisPass",
    "Analyzer",
    "AuditSink",
    "ReturnSiteExtractor",
    "aggregate",
    "analyzer",
    "classify_function",
    "describe",
    "extract_descriptors",
    "walk_file",
]
