from .supabase_client import get_supabase_client, get_session_supabase_client

__all__ = ["get_supabase_client", "get_session_supabase_client"]
