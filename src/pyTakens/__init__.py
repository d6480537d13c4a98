"""Python tools for time-delay embedding and correlation dimension"""
from .Functions import embed, embed_auto, validate_parameters
from .Functions import estimate_embedding_dimension, estimate_delay
from .Functions import autocorrelation, autocorrelation_function
from .Functions import correlation_dimension, correlation_sum
from .Utils import SurrogateData
from .Embed import Embed, EmbedAuto
from .ExampleData import sampleData

# Import parameter and result objects
from .Parameters import (
    EmbeddingParameters,
    CorrelationDimensionParameters,
    ExecutionParameters
)
from .Results import (
    ValidationResult,
    EmbeddingResult,
    DelayResult,
    CorrelationDimensionResult
)
from .CorrelationDimension import CorrelationDimension
# Import visualization functions
from .Visualization import (
    plot_autocorrelation,
    plot_correlation_sum,
    plot_embedding
)
# Import execution configuration
from .Execution import ExecutionMode

__version__     = "1.0.0"
__versionDate__ = "2026-10-18"
