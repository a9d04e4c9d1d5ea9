from __future__ import annotations
import time
import functools
from typing import Callable, Dict, Optional
from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode
from wordcount.obs.metrics import record_duration
from wordcount.obs.logging_setup import get_logger

logger = get_logger(__name__)

def traced(
    operation_name: Optional[str] = None,
    include_args: bool = False,
    include_result: bool = False,
):
    """Decorator to add OpenTelemetry tracing to functions."""
    
    def decorator(func: Callable) -> Callable:
        tracer = trace.get_tracer(__name__)
        span_name = operation_name or f"{func.__module__}.{func.__name__}"
        
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            with tracer.start_as_current_span(span_name) as span:
                span.set_attribute("function.name", func.__name__)
                span.set_attribute("function.module", func.__module__)
                
                if include_args:
                    span.set_attribute("function.args", repr(args)[:500])
                    span.set_attribute("function.kwargs", repr(kwargs)[:500])
                
                start_time = time.perf_counter()
                
                try:
                    result = func(*args, **kwargs)
                    
                    span.set_status(Status(StatusCode.OK))
                    
                    if include_result:
                        span.set_attribute("function.result", str(result)[:500])
                    
                    return result
                    
                except Exception as e:
                    span.record_exception(e)
                    span.set_status(Status(StatusCode.ERROR, str(e)))
                    
                    logger.error(
                        f"Function {func.__name__} failed",
                        error=str(e),
                        function=func.__name__
                    )
                    
                    raise
                    
                finally:
                    duration_ms = (time.perf_counter() - start_time) * 1000
                    record_duration(
                        "function_duration_ms",
                        duration_ms,
                        {"function": func.__name__, "module": func.__module__}
                    )
        
        return wrapper
    
    return decorator

def timed(metric_name: Optional[str] = None, labels: Optional[Dict[str, str]] = None):
    """Decorator to time function execution and record metrics."""
    
    def decorator(func: Callable) -> Callable:
        name = metric_name or f"{func.__name__}_duration_ms"
        
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            start_time = time.perf_counter()
            try:
                return func(*args, **kwargs)
            finally:
                duration_ms = (time.perf_counter() - start_time) * 1000
                record_duration(name, duration_ms, labels)
        
        return wrapper
    
    return decorator
