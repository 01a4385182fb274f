"""
Numberle Game Server - Main Entry Point

This is the main entry point for the Numberle game server.
It initializes the game service and starts the Flask application.
"""

from numberle import create_app
from numberle.config import Config, get_equation_statistics, validate_equation_list_integrity
from numberle.services.game_service import initialize_game_service
from numberle.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Initializing services...")

        game_service = initialize_game_service()
        if game_service.equations:
            try:
                validate_equation_list_integrity(game_service.equations)
                stats = get_equation_statistics(game_service.equations)
                print(f"✓ Game service initialized with {stats['total_equations']} equations")
            except ValueError as corpus_error:
                print(f"✗ Equation list failed validation: {corpus_error}")
                game_logger.logger.warning(f"Equation list failed validation: {corpus_error}")
        else:
            print("✗ No equations loaded, every game uses the fallback equation")

        print("Creating Flask application...")
        app = create_app(Config)
        print("✓ Flask application created successfully")

        game_logger.logger.info("Numberle Server Starting")

        print(f"\nStarting Numberle Game Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print(f"Random targets: {Config.RANDOM_TARGET}")
        print("=" * 50)

        app.run(host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Numberle Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
