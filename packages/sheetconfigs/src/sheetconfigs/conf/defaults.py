"""Default configuration values for sheetconfigs."""

DEFAULTS: dict[str, object] = {
    # Emit a DEBUG record for every registered slot
    "LOG_REGISTRATIONS": True,
    # Wrap registrations in OpenTelemetry spans
    "TRACING_ENABLED": True,
    "TRACER_NAME": "sheetconfigs",
    # bootstrap_configs() seals the registry once every source is registered
    "SEAL_ON_BOOTSTRAP": True,
}
