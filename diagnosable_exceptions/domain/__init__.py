"""Domain layer - Diagnosable errors and their documentation.

This layer defines how an error is identified, what an occurrence carries and
how an error type is documented. It has NO dependencies on the application or
infrastructure layers.

Structure:
- value_objects/: ErrorCode and ContextKey (process-wide registered identifiers)
- context/: ErrorContext snapshot and its builder
- exceptions/: DiagnosableException hierarchy and documentation links
- documentation/: documentation records and the staged builder
- enums/: ErrorCauseType, FlowDirection
- errors/: documentation API misuse errors
- protocols/: LoggerProtocol (port implemented by infrastructure)
"""
