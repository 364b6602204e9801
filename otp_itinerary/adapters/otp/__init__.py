"""OTP adapters - Implementations of OTPTransportPort.

Available implementations:
- RequestsOTPClient: Calls the OTP REST plan endpoint with requests
"""

from .requests_adapter import RequestsOTPClient

__all__ = ["RequestsOTPClient"]
