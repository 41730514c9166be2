from journai.services.insight_service import InsightAggregator, JournalInsightService
from journai.services.journal_service import JournalService
from journai.services.response_interpreter import ResponseInterpreter, interpret, interpret_envelope

__all__ = [
    "InsightAggregator",
    "JournalInsightService",
    "JournalService",
    "ResponseInterpreter",
    "interpret",
    "interpret_envelope",
]
