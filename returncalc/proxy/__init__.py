from .forwarder import LeadForwarder, MalformedBodyError, ProxyResponse, parse_lead_body

__all__ = ["LeadForwarder", "MalformedBodyError", "ProxyResponse", "parse_lead_body"]
