from customer_manager.cli.main import main

raise SystemExit(main())
