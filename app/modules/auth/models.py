# Supabase Auth
# Accounts live in auth.users, managed by Supabase Auth:
# - sign_up / sign_in_with_password issue sessions
# - auth.get_user(jwt) resolves a bearer token to its user

"""
Auth owns no tables. LinkMage keeps per-user data keyed by auth.users.id:

- profiles (see app.modules.users.models)
- user_settings (see app.modules.users.models)
- ai_notes (see app.modules.notes.models)
- link_history (see app.modules.history.models)

full_name passed at registration is stored in user_metadata and copied into
profiles by a database trigger on auth.users.
"""
