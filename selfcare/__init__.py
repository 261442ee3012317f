"""SelfCare — daily wellness tracker API over Supabase."""
