"""
Game Logger Module for the Numberle Server

Structured logging for player requests, server answers and game outcomes.
Every entry is a JSON document so the daily log file can be read line by line.
The log directory and file handler are only created on first use.
"""

import logging
import json
from datetime import datetime
from typing import Dict, Any, Optional
from pathlib import Path

from ..config.app_config import Config
from .helpers import get_user_identity

LOGGER_NAME = 'numberle_game'


class GameLogger:
    """
    Centralized logging for Numberle games.

    Entry types: USER_ACTION, SERVER_RESPONSE_SUCCESS / SERVER_RESPONSE_ERROR,
    GAME_EVENT (game_won, game_lost, answer_revealed, game_deleted) and ERROR.
    """

    def __init__(self, log_dir: str = "logs", level: str = "INFO"):
        self.log_dir = Path(log_dir)
        self.level = getattr(logging, str(level).upper(), logging.INFO)
        self._logger: Optional[logging.Logger] = None

    @property
    def logger(self) -> logging.Logger:
        if self._logger is None:
            self._logger = self._setup_logger()
        return self._logger

    def _log_file(self) -> Path:
        return self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"

    def _setup_logger(self) -> logging.Logger:
        """File handler for every entry, console for warnings and errors."""
        self.log_dir.mkdir(parents=True, exist_ok=True)

        logger = logging.getLogger(LOGGER_NAME)
        logger.setLevel(self.level)
        if logger.handlers:
            logger.handlers.clear()

        file_handler = logging.FileHandler(self._log_file(), encoding='utf-8')
        file_handler.setLevel(self.level)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s | %(levelname)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))

        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))

        logger.addHandler(file_handler)
        logger.addHandler(console_handler)
        return logger

    def _write(self, level: int, event_type: str, action: str,
               user_info: Dict[str, Any], details: Dict[str, Any]) -> None:
        entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'user': user_info,
            'details': details
        }
        self.logger.log(level, json.dumps(entry, ensure_ascii=False, default=str))

    def log_user_action(self, request, action: str, game_id: Optional[str] = None, **kwargs):
        """Records an incoming API call ('new_game', 'submit_guess', ...)."""
        details = {
            'game_id': game_id,
            'endpoint': request.endpoint,
            'method': request.method,
            **kwargs
        }
        self._write(logging.INFO, 'USER_ACTION', action, get_user_identity(request), details)

    def log_server_response(self, request, action: str, success: bool,
                            response_data: Dict[str, Any], game_id: Optional[str] = None, **kwargs):
        """Records the answer sent back; failures are logged at ERROR level."""
        details = {
            'game_id': game_id,
            'success': success,
            'response_data': self._summarize(response_data),
            **kwargs
        }
        if success:
            self._write(logging.INFO, 'SERVER_RESPONSE_SUCCESS', action, get_user_identity(request), details)
        else:
            self._write(logging.ERROR, 'SERVER_RESPONSE_ERROR', action, get_user_identity(request), details)

    def log_game_event(self, game_id: Optional[str], event: str, user_ip: Optional[str], **kwargs):
        user_info = {'user_ip': user_ip or 'unknown', 'session_id': None, 'username': None}
        self._write(logging.INFO, 'GAME_EVENT', event, user_info, {'game_id': game_id, **kwargs})

    def log_error(self, request, error: Exception, action: str, game_id: Optional[str] = None):
        details = {
            'game_id': game_id,
            'error_type': type(error).__name__,
            'error_message': str(error)
        }
        self._write(logging.ERROR, 'ERROR', action, get_user_identity(request), details)

    def _summarize(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Replaces a full game state by the fields worth keeping in the log."""
        if not isinstance(data, dict):
            return {'data_type': type(data).__name__}

        summary = data.copy()
        state = summary.get('state')
        if isinstance(state, dict):
            summary['state'] = {
                'status': state.get('status'),
                'remaining_attempts': state.get('remaining_attempts'),
                'guesses_count': len(state.get('guesses', [])),
                'answer_revealed': state.get('answer') is not None
            }
        return summary

    def get_log_stats(self) -> Dict[str, Any]:
        """Counts today's entries per type (reported by /health)."""
        log_file = self._log_file()
        if not log_file.exists():
            return {'error': 'No log file found for today'}

        counts = {'USER_ACTION': 0, 'SERVER_RESPONSE': 0, 'GAME_EVENT': 0, 'ERROR': 0}
        total = 0
        try:
            with open(log_file, 'r', encoding='utf-8') as f:
                for line in f:
                    if not line.strip():
                        continue
                    total += 1
                    for event_type in counts:
                        if f'"event_type": "{event_type}' in line:
                            counts[event_type] += 1
                            break
        except OSError as e:
            return {'error': f'Failed to get stats: {e}'}

        return {
            'log_file': str(log_file),
            'total_entries': total,
            'user_actions': counts['USER_ACTION'],
            'server_responses': counts['SERVER_RESPONSE'],
            'game_events': counts['GAME_EVENT'],
            'errors': counts['ERROR']
        }


# Global logger instance
game_logger = GameLogger(Config.LOG_DIR, Config.LOG_LEVEL)
