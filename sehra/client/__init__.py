"""Client-side core: session, routing guards, realtime channel and notifications."""
