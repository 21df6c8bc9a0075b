"""PyQt5 user interface for attredit: dialogs and the InteractionPort adapter."""
